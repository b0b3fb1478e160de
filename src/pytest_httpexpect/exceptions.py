from typing import Any


class HeaderAssertionError(AssertionError):
    """A failed expectation on a captured HTTP response."""

    def __init__(self, message: str, name: str | None = None, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.message = message
        self.name = name
        self.expected = expected
        self.actual = actual


class HeaderMissingError(HeaderAssertionError):
    pass


class HeaderMismatchError(HeaderAssertionError):
    pass


class HeaderDateParseError(HeaderAssertionError):
    pass


class StatusMismatchError(HeaderAssertionError):
    pass


class DispatchError(Exception):
    pass
