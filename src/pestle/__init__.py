"""pestle - describe blocks with scoped hooks, mocks and test drives."""

from .config import PestleConfig, load_config
from .context import Session, current_session
from .errors import ConfigError, DescribeConfigError
from .testing import BLOCK_FAILURE_NAME, describe, hook, it, mock, tag
from .types import TestResult, TestStatus
from .version import __version__


__all__ = [
    # Blocks
    "describe",
    "it",
    "mock",
    "hook",
    "tag",
    "BLOCK_FAILURE_NAME",
    # Session
    "Session",
    "current_session",
    "TestResult",
    "TestStatus",
    # Configuration
    "PestleConfig",
    "load_config",
    # Errors
    "ConfigError",
    "DescribeConfigError",
]
