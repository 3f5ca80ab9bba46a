from .context import SESSION_CONTEXT, current_session, session_scope
from .session import Session

__all__ = [
    "SESSION_CONTEXT",
    "Session",
    "current_session",
    "session_scope",
]
