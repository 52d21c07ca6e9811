from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger

from grid_errors import UnknownEventKind


class EventKind(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"


@dataclass(frozen=True)
class AddEvent:
    index: int
    data: list


@dataclass(frozen=True)
class RemoveEvent:
    index: int
    data: list


@dataclass(frozen=True)
class ChangeEvent:
    # row is the position in the derived view, None when not visible there.
    # Structural changes leave col and both values unset.
    row: Optional[int]
    col: Optional[str] = None
    old_val: Any = None
    new_val: Any = None
    col_index: Optional[int] = None


def resolve_kind(kind) -> EventKind:
    if isinstance(kind, EventKind):
        return kind
    try:
        return EventKind(kind)
    except ValueError:
        raise UnknownEventKind(kind) from None


class EventBus:
    """Synchronous add/remove/change notifications."""

    def __init__(self):
        self._handlers: dict[EventKind, list[Callable]] = {k: [] for k in EventKind}

    def on(self, kind, handler: Callable) -> Callable:
        event_kind = resolve_kind(kind)
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handlers[event_kind].append(handler)
        return handler

    def off(self, kind, handler: Callable) -> bool:
        handlers = self._handlers[resolve_kind(kind)]
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def handler_count(self, kind) -> int:
        return len(self._handlers[resolve_kind(kind)])

    def emit(self, kind, payload) -> None:
        event_kind = resolve_kind(kind)
        # Copy so a handler may unsubscribe itself mid-emission.
        handlers = list(self._handlers[event_kind])
        logger.trace(f"Emitting {event_kind.value} to {len(handlers)} handlers")
        for handler in handlers:
            handler(payload)
