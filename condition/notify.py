"""Forward allow-list changes to Telegram."""

from typing import Callable

from condition.signatures import describe_selector
from utils.events import EventKind, SelectorEvent, register_event_hook
from utils.logging import get_logger
from utils.telegram import TelegramError, send_telegram_message

logger = get_logger("condition.notify")

CHANNEL = "condition"

_EMOJI = {
    EventKind.ALLOWED: "✅",
    EventKind.DISALLOWED: "⛔",
}

# channel -> the single Telegram hook forwarding to it
_channel_hooks: dict[str, Callable[[SelectorEvent], None]] = {}


def format_event(event: SelectorEvent) -> str:
    signature = describe_selector(event.selector)
    label = f"{event.selector_hex} ({signature})" if signature else event.selector_hex
    return f"{_EMOJI[event.kind]} {event.kind.value}: {label}\n👤 By: {event.caller}"


def telegram_hook(channel: str = CHANNEL) -> Callable[[SelectorEvent], None]:
    def hook(event: SelectorEvent) -> None:
        try:
            send_telegram_message(format_event(event), channel, disable_notification=True)
        except TelegramError:
            logger.exception("Failed to forward %s to Telegram", event.kind.value)

    return hook


def install_notifications(enabled: bool, channel: str = CHANNEL) -> bool:
    """Register the Telegram hook for ``channel`` when notifications are enabled.

    One hook exists per channel; installing again re-registers that same hook,
    which the event registry ignores if it is already present.
    """
    if not enabled:
        return False
    if channel not in _channel_hooks:
        _channel_hooks[channel] = telegram_hook(channel)
    register_event_hook(_channel_hooks[channel])
    return True
