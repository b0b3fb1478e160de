"""Fluent builders for response expectations.

Example::

    client.get("/persons/1", headers={"If-Modified-Since": now}) \\
        .and_expect(status().is_not_modified()) \\
        .and_expect(header().string_values("X-Custom-Header"))
"""

from http import HTTPStatus
from typing import Any, Self

from .engine import verify
from .entities import Assertion, DateEquals, DoesNotExist, Exists, LongEquals, MultiValueEquals, StatusEquals, StringEquals
from .matchers import is_matcher
from .response import CapturedResponse


class HeaderResultMatchers:
    """Factory for header expectations."""

    def string(self, name: str, expected: Any) -> StringEquals:
        return StringEquals(name=name, expected=expected)

    def string_values(self, name: str, *expected: Any) -> MultiValueEquals:
        if len(expected) == 1 and (is_matcher(expected[0]) or callable(expected[0])):
            return MultiValueEquals(name=name, expected=expected[0])
        return MultiValueEquals(name=name, expected=expected)

    def date_value(self, name: str, expected: int) -> DateEquals:
        return DateEquals(name=name, expected=expected)

    def long_value(self, name: str, expected: int) -> LongEquals:
        return LongEquals(name=name, expected=expected)

    def exists(self, name: str) -> Exists:
        return Exists(name=name)

    def does_not_exist(self, name: str) -> DoesNotExist:
        return DoesNotExist(name=name)


class StatusResultMatchers:
    """Factory for status code expectations."""

    def is_(self, expected: int) -> StatusEquals:
        return StatusEquals(expected=int(expected))

    def is_ok(self) -> StatusEquals:
        return self.is_(HTTPStatus.OK)

    def is_created(self) -> StatusEquals:
        return self.is_(HTTPStatus.CREATED)

    def is_no_content(self) -> StatusEquals:
        return self.is_(HTTPStatus.NO_CONTENT)

    def is_not_modified(self) -> StatusEquals:
        return self.is_(HTTPStatus.NOT_MODIFIED)

    def is_not_found(self) -> StatusEquals:
        return self.is_(HTTPStatus.NOT_FOUND)


def header() -> HeaderResultMatchers:
    return HeaderResultMatchers()


def status() -> StatusResultMatchers:
    return StatusResultMatchers()


class ResultActions:
    """Outcome of a performed request, open to chained expectations."""

    def __init__(self, response: CapturedResponse):
        self._response = response

    @property
    def response(self) -> CapturedResponse:
        return self._response

    def and_expect(self, *assertions: Assertion) -> Self:
        """Evaluate assertions immediately; the first failure propagates."""
        for assertion in assertions:
            verify(self._response, assertion)
        return self

    def and_return(self) -> CapturedResponse:
        return self._response
