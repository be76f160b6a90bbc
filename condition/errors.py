"""Exceptions raised by the allow-list and the execute-call decoder."""


class SelectorConditionError(Exception):
    """Base class for selector condition errors."""


class DuplicateStateError(SelectorConditionError):
    """A mutation was requested for a selector already in the target state."""

    def __init__(self, selector: bytes):
        self.selector = selector
        super().__init__(f"{type(self).__name__}: 0x{selector.hex()}")


class AlreadyAllowed(DuplicateStateError):
    pass


class AlreadyDisallowed(DuplicateStateError):
    pass


class AuthorizationError(SelectorConditionError):
    """The caller lacks the capability to manage the allow-list."""


class Unauthorized(AuthorizationError):
    def __init__(self, caller):
        self.caller = caller
        super().__init__(f"{caller} may not manage selectors")


class DecodeError(SelectorConditionError):
    """Payload is not a well-formed execute call. Never escapes the gate."""
