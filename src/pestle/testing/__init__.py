"""Describe blocks, test units and their scoped resources."""

from .filters import matches_name, should_run
from .hooks import HookKind, HookRegistry, HookSet, hook, scan_hooks
from .mocks import MockRegistry
from .tags import tag
from .test_drive import TestDrive
from .block import BLOCK_FAILURE_NAME, BlockOutcome, context, describe, execute, run_block
from .unit import it, mock


__all__ = [
    "BLOCK_FAILURE_NAME",
    "BlockOutcome",
    "HookKind",
    "HookRegistry",
    "HookSet",
    "MockRegistry",
    "TestDrive",
    "context",
    "describe",
    "execute",
    "hook",
    "it",
    "matches_name",
    "mock",
    "run_block",
    "scan_hooks",
    "should_run",
    "tag",
]
