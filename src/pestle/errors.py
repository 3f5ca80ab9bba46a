"""Error types raised by pestle."""


class DescribeConfigError(ValueError):
    """Raised when a block or test unit is declared with invalid arguments.

    Raised at call time, before any scope is entered.
    """


class ConfigError(Exception):
    """Raised when project configuration cannot be loaded."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid pestle configuration in {source}: {detail}")


class CleanupError(Exception):
    """Raised when one or more release steps of a block fail.

    Carries every failure so that none of them is hidden behind another.
    """

    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = list(errors)
        details = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} cleanup step(s) failed: {details}")
