"""Demonstrates describe blocks, hooks, mocks and the test drive."""

import json
from pathlib import Path

import pestle
from pestle import describe, hook, it, mock


class Settings:
    @staticmethod
    def source() -> str:
        return "production"


def load_settings(path):
    return json.loads(path.read_text())


session = pestle.Session.from_config(pestle.load_config())


def write_settings():
    (session.test_drive_path / "settings.json").write_text('{"debug": true}')


@hook.before_all(write_settings)
@pestle.tag("fast")
def settings_tests() -> None:
    def reads_file() -> None:
        settings = load_settings(session.test_drive_path / "settings.json")
        assert settings["debug"] is True

    it("reads settings from the test drive", reads_file)

    def when_mocked() -> None:
        mock(Settings, "source", return_value="fixture")
        it("uses the mocked source", lambda: assert_source("fixture"))

    session.context("with a mocked source", when_mocked)
    it("restores the real source", lambda: assert_source("production"))
    it("handles remote settings", pending=True)


def assert_source(expected: str) -> None:
    assert Settings.source() == expected


describe("Settings", settings_tests, session=session)

describe("Broken arrange code", lambda: load_settings(Path("missing.json")), session=session)

print(f"\n{session.passed} passed, {session.failed} failed, {session.pending} pending")
