import os

import requests
from dotenv import load_dotenv

from utils.config import Config
from utils.logging import get_logger

load_dotenv()

logger = get_logger("utils.telegram")

MAX_MESSAGE_LENGTH = 4096


class TelegramError(Exception):
    """Raised when the Telegram API rejects or cannot receive a message."""


def send_telegram_message(message: str, channel: str, disable_notification: bool = False) -> None:
    """Send a message to the chat configured for ``channel``.

    Credentials come from ``TELEGRAM_BOT_TOKEN_<CHANNEL>`` and
    ``TELEGRAM_CHAT_ID_<CHANNEL>``. Missing credentials are logged and the
    message is dropped.
    """
    bot_token = os.getenv(f"TELEGRAM_BOT_TOKEN_{channel.upper()}")
    chat_id = os.getenv(f"TELEGRAM_CHAT_ID_{channel.upper()}")
    if not bot_token or not chat_id:
        logger.warning("Missing Telegram credentials for %s", channel)
        return

    if len(message) > MAX_MESSAGE_LENGTH:
        message = message[: MAX_MESSAGE_LENGTH - 3] + "..."

    url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
    params = {
        "chat_id": chat_id,
        "text": message,
        "disable_notification": disable_notification,
    }
    try:
        response = requests.get(url, params=params, timeout=Config.get_request_timeout())
    except requests.RequestException as e:
        raise TelegramError(f"Failed to send telegram message: {e}") from e
    if response.status_code != 200:
        raise TelegramError(f"Failed to send telegram message: {response.status_code} - {response.text}")
