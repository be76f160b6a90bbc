"""Resolve selectors to human-readable signatures for diagnostics."""

from condition.known_selectors import KNOWN_SELECTORS
from condition.selectors import EXECUTE_SELECTOR, EXECUTE_SIGNATURE, format_selector
from utils.http import fetch_json
from utils.logging import get_logger

logger = get_logger("condition.signatures")

# In-memory cache: selector hex -> signature or None
_signature_cache: dict[str, str | None] = {}

# Sourcify 4byte signature database
_SELECTOR_LOOKUP_URL = "https://api.4byte.sourcify.dev/signature-database/v1/lookup"


def _lookup_remote(selector_hex: str) -> str | None:
    data = fetch_json(_SELECTOR_LOOKUP_URL, params={"function": selector_hex})
    if not data:
        return None
    try:
        results = data.get("result", {}).get("function", {}).get(selector_hex)
        if results:
            return results[0].get("name")
    except (AttributeError, IndexError, TypeError):
        logger.debug("Unexpected lookup response for %s", selector_hex)
    return None


def describe_selector(selector: bytes | None, resolve: bool = False) -> str | None:
    """Return the text signature of ``selector`` if it is known.

    Args:
        selector: Raw 4-byte selector, or None for actions without one.
        resolve: Query the Sourcify API for selectors missing from the local table.
    """
    if selector is None:
        return None
    if selector == EXECUTE_SELECTOR:
        return EXECUTE_SIGNATURE

    selector_hex = format_selector(selector)
    if selector_hex in KNOWN_SELECTORS:
        return KNOWN_SELECTORS[selector_hex]
    if not resolve:
        return None
    if selector_hex not in _signature_cache:
        _signature_cache[selector_hex] = _lookup_remote(selector_hex)
    return _signature_cache[selector_hex]
