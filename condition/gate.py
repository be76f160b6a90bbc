"""Permission condition that only lets a DAO execute allow-listed selectors.

The governing framework calls ``BatchGate.is_granted`` before running an
execute call. The call is permitted when it is an execute call and every
action in it invokes a selector present in the allow-list. Anything else,
including payloads that fail to decode, is denied.
"""

from dataclasses import dataclass
from enum import Enum

from condition.allow_list import AllowList
from condition.decoder import ExecutionRequest, decode_execute_call
from condition.errors import DecodeError
from condition.selectors import EXECUTE_SELECTOR, extract_selector
from utils.logging import get_logger

logger = get_logger("condition.gate")


class Reason(Enum):
    PERMITTED = "permitted"
    NOT_EXECUTE_CALL = "not an execute call"
    MALFORMED_PAYLOAD = "malformed execute payload"
    MISSING_SELECTOR = "action data shorter than a selector"
    SELECTOR_NOT_ALLOWED = "selector not allowed"


@dataclass(frozen=True)
class Evaluation:
    """Decision for one payload, with the first offending action when denied.

    ``request`` is the decoded execute call whenever decoding succeeded.
    """

    permitted: bool
    reason: Reason
    action_index: int | None = None
    selector: bytes | None = None
    request: ExecutionRequest | None = None


class BatchGate:
    def __init__(self, allow_list: AllowList):
        self.allow_list = allow_list

    def evaluate(self, data: bytes) -> Evaluation:
        """Decide on ``data`` and explain the outcome.

        Actions are checked in order and the first failure decides. An
        execute call with no actions is permitted. Action data shorter than
        4 bytes carries no selector and is denied even if the zero selector
        is allow-listed.
        """
        outer = extract_selector(data)
        if outer != EXECUTE_SELECTOR:
            return Evaluation(False, Reason.NOT_EXECUTE_CALL, selector=outer)

        try:
            request = decode_execute_call(data)
        except DecodeError:
            return Evaluation(False, Reason.MALFORMED_PAYLOAD)

        for index, action in enumerate(request.actions):
            selector = action.selector
            if selector is None:
                return Evaluation(False, Reason.MISSING_SELECTOR, action_index=index, request=request)
            if not self.allow_list.contains(selector):
                return Evaluation(False, Reason.SELECTOR_NOT_ALLOWED, action_index=index, selector=selector, request=request)

        return Evaluation(True, Reason.PERMITTED, request=request)

    def is_granted(self, where: str, who: str, permission_id: bytes, data: bytes) -> bool:
        """Return whether the DAO ``where`` may run the call ``data`` for ``who``.

        ``where``, ``who`` and ``permission_id`` identify the permission check
        and are not inspected. Never raises.
        """
        try:
            result = self.evaluate(data)
        except Exception:
            logger.exception("Unexpected failure evaluating payload, denying")
            return False
        if not result.permitted:
            logger.debug("Denied call from %s on %s: %s (action %s)", who, where, result.reason.value, result.action_index)
        return result.permitted
