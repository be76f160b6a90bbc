"""Decode DAO execute calls into their ordered actions.

The payload layout is the Solidity ABI encoding of
``execute(bytes32,(address,uint256,bytes)[],uint256)``: a 4-byte selector
followed by the argument tuple (fixed-size head, dynamic tail behind offsets).
"""

from dataclasses import dataclass
from typing import Iterable

from eth_abi import decode, encode
from eth_utils import to_checksum_address

from condition.errors import DecodeError
from condition.selectors import EXECUTE_SELECTOR, SELECTOR_LENGTH, extract_selector
from utils.logging import get_logger

logger = get_logger("condition.decoder")

EXECUTE_ARGUMENT_TYPES = ["bytes32", "(address,uint256,bytes)[]", "uint256"]


@dataclass(frozen=True)
class Action:
    """One call of a batch."""

    target: str
    value: int
    data: bytes

    @property
    def selector(self) -> bytes | None:
        return extract_selector(self.data)


@dataclass(frozen=True)
class ExecutionRequest:
    proposal_id: bytes
    actions: tuple[Action, ...]
    allow_failure_map: int


def decode_execute_call(payload: bytes) -> ExecutionRequest:
    """Decode a full execute payload, selector included.

    Raises:
        DecodeError: If the selector is not the execute selector or the
            argument encoding is truncated, mis-padded or points out of bounds.
    """
    if extract_selector(payload) != EXECUTE_SELECTOR:
        raise DecodeError("Payload is not an execute call")

    try:
        proposal_id, raw_actions, allow_failure_map = decode(EXECUTE_ARGUMENT_TYPES, bytes(payload[SELECTOR_LENGTH:]))
        actions = tuple(Action(to_checksum_address(target), value, bytes(data)) for target, value, data in raw_actions)
    except Exception as e:
        logger.debug("Failed to decode execute call: %s", e)
        raise DecodeError(f"Malformed execute call: {e}") from e

    return ExecutionRequest(proposal_id=bytes(proposal_id), actions=actions, allow_failure_map=allow_failure_map)


def encode_execute_call(proposal_id: bytes, actions: Iterable[Action], allow_failure_map: int = 0) -> bytes:
    """Build an execute payload the way the DAO receives it."""
    raw_actions = [(action.target, action.value, action.data) for action in actions]
    return EXECUTE_SELECTOR + encode(EXECUTE_ARGUMENT_TYPES, [proposal_id, raw_actions, allow_failure_map])
