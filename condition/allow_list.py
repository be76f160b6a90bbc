"""Administrator-maintained set of permitted function selectors."""

from typing import Callable, Iterable, Iterator

from eth_utils import keccak, to_checksum_address

from condition.errors import AlreadyAllowed, AlreadyDisallowed, Unauthorized
from condition.selectors import to_selector
from utils.events import EventKind, SelectorEvent, emit_event
from utils.logging import get_logger

logger = get_logger("condition.allow_list")

# Permission the governing framework grants to allow-list administrators
MANAGE_SELECTORS_PERMISSION_ID = keccak(text="MANAGE_SELECTORS_PERMISSION")

ManagerPredicate = Callable[[str], bool]


def admin_predicate(addresses: Iterable[str]) -> ManagerPredicate:
    """Build a ``may_manage`` predicate that accepts only the given addresses.

    Addresses are compared in checksummed form, so case does not matter.
    Callers that are not valid addresses are rejected.
    """
    admins = frozenset(to_checksum_address(address) for address in addresses)

    def may_manage(caller: str) -> bool:
        try:
            return to_checksum_address(caller) in admins
        except (TypeError, ValueError):
            return False

    return may_manage


class AllowList:
    """A key-presence set of selectors with gated, individually notified mutation.

    The seed is applied without events and without duplicate checks. After
    construction the set changes only through ``allow`` and ``disallow``,
    each of which asks ``may_manage`` once before touching anything.
    """

    def __init__(self, may_manage: ManagerPredicate, initial_selectors: Iterable = ()):
        self._may_manage = may_manage
        self._selectors: set[bytes] = {to_selector(s) for s in initial_selectors}
        logger.debug("Seeded allow-list with %s selectors", len(self._selectors))

    def _require_manager(self, caller: str) -> None:
        if not self._may_manage(caller):
            logger.warning("Rejected allow-list change from %s", caller)
            raise Unauthorized(caller)

    def allow(self, caller: str, selector: bytes | str) -> None:
        """Add a selector.

        Raises:
            Unauthorized: If ``caller`` may not manage the list.
            AlreadyAllowed: If the selector is already present.
        """
        self._require_manager(caller)
        selector = to_selector(selector)
        if selector in self._selectors:
            raise AlreadyAllowed(selector)
        self._selectors.add(selector)
        emit_event(SelectorEvent(EventKind.ALLOWED, selector, caller))

    def disallow(self, caller: str, selector: bytes | str) -> None:
        """Remove a selector.

        Raises:
            Unauthorized: If ``caller`` may not manage the list.
            AlreadyDisallowed: If the selector is not present.
        """
        self._require_manager(caller)
        selector = to_selector(selector)
        if selector not in self._selectors:
            raise AlreadyDisallowed(selector)
        self._selectors.discard(selector)
        emit_event(SelectorEvent(EventKind.DISALLOWED, selector, caller))

    def contains(self, selector: bytes | str) -> bool:
        try:
            return to_selector(selector) in self._selectors
        except ValueError:
            return False

    def __contains__(self, selector: bytes | str) -> bool:
        return self.contains(selector)

    def __len__(self) -> int:
        return len(self._selectors)

    def __iter__(self) -> Iterator[bytes]:
        return iter(sorted(self._selectors))
