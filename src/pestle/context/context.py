from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from pestle.context.session import Session


SESSION_CONTEXT: ContextVar[Session | None] = ContextVar("session_context", default=None)


def current_session() -> Session | None:
    """Session of the describe block currently executing, if any."""
    return SESSION_CONTEXT.get()


@contextmanager
def session_scope(session: Session) -> Iterator[None]:
    token = SESSION_CONTEXT.set(session)
    try:
        yield
    finally:
        SESSION_CONTEXT.reset(token)
