"""Function selector helpers.

A selector is the first 4 bytes of a call payload and identifies which
function the payload invokes, independent of its arguments. Selectors are
kept as raw ``bytes`` and only compared for equality.
"""

from eth_utils import function_signature_to_4byte_selector

SELECTOR_LENGTH = 4

# DAO.execute(bytes32 callId, Action[] actions, uint256 allowFailureMap)
EXECUTE_SIGNATURE = "execute(bytes32,(address,uint256,bytes)[],uint256)"


def selector_from_signature(signature: str) -> bytes:
    """Derive the 4-byte selector of a text signature like "transfer(address,uint256)"."""
    return bytes(function_signature_to_4byte_selector(signature.replace(" ", "")))


EXECUTE_SELECTOR = selector_from_signature(EXECUTE_SIGNATURE)


def extract_selector(data) -> bytes | None:
    """Return the leading 4 bytes of ``data``, or None when it is shorter than that."""
    if data is None or len(data) < SELECTOR_LENGTH:
        return None
    return bytes(data[:SELECTOR_LENGTH])


def to_selector(value) -> bytes:
    """Normalise 4 raw bytes or a "0x"-prefixed 8 hex digit string to a selector.

    Raises:
        ValueError: If the value is not exactly one selector.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value.strip().lower().removeprefix("0x")
        try:
            raw = bytes.fromhex(text)
        except ValueError:
            raise ValueError(f"Invalid selector hex: {value!r}") from None
    else:
        raise ValueError(f"Unsupported selector type: {type(value).__name__}")
    if len(raw) != SELECTOR_LENGTH:
        raise ValueError(f"Selector must be {SELECTOR_LENGTH} bytes, got {len(raw)}: {value!r}")
    return raw


def format_selector(selector: bytes | None) -> str:
    if selector is None:
        return "<none>"
    return "0x" + selector.hex()
