"""Notifications for allow-list state transitions.

Usage::

    from utils.events import EventKind, SelectorEvent, emit_event, register_event_hook

    register_event_hook(lambda event: print(event.kind, event.selector.hex()))
    emit_event(SelectorEvent(EventKind.ALLOWED, bytes.fromhex("a9059cbb"), caller))

Every event is logged at INFO, which is the audit trail of record. Hooks are
optional off-component observers (a Telegram sink, a test recorder, ...).
Hook exceptions are logged and swallowed: a failing observer never undoes a
committed state transition.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from utils.logging import get_logger

logger = get_logger("utils.events")

# Registered observers, invoked in registration order
_event_hooks: list[Callable[["SelectorEvent"], None]] = []


class EventKind(Enum):
    """Allow-list state transitions."""

    ALLOWED = "SelectorAllowed"
    DISALLOWED = "SelectorDisallowed"


@dataclass(frozen=True)
class SelectorEvent:
    """Immutable record of one allow-list change."""

    kind: EventKind
    selector: bytes
    caller: str

    @property
    def selector_hex(self) -> str:
        return "0x" + self.selector.hex()


def register_event_hook(callback: Callable[[SelectorEvent], None]) -> None:
    """Register an observer called with every emitted event.

    Registering the same callback again is a no-op, so each event reaches an
    observer once.
    """
    if callback not in _event_hooks:
        _event_hooks.append(callback)


def clear_event_hooks() -> None:
    _event_hooks.clear()


def emit_event(event: SelectorEvent) -> None:
    """Log the event and hand it to every registered hook."""
    logger.info("%s selector=%s caller=%s", event.kind.value, event.selector_hex, event.caller)
    for hook in list(_event_hooks):
        try:
            hook(event)
        except Exception:
            logger.exception("Event hook failed for %s %s", event.kind.value, event.selector_hex)
