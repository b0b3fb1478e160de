"""Header assertion engine.

Each function evaluates one expectation against one captured response and
either returns ``None`` or raises a :class:`HeaderAssertionError` subclass.
Messages follow a fixed grammar that callers match on:

- ``Response header '<name>' expected:<...> but was:<...>`` for a mismatch,
- ``Response does not contain header '<name>'`` when a value is required
  but the header is absent.
"""

import logging
import re
from collections.abc import Iterable
from typing import Any

from .dates import format_http_date, parse_http_date, truncate_to_seconds
from .entities import Assertion, DateEquals, DoesNotExist, Exists, LongEquals, MultiValueEquals, StatusEquals, StringEquals
from .exceptions import HeaderMismatchError, HeaderMissingError, StatusMismatchError
from .matchers import Matcher, as_matcher, is_matcher
from .response import CapturedResponse

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _mismatch_message(name: str, expected: Any, actual: Any) -> str:
    return f"Response header '{name}' expected:<{expected}> but was:<{actual}>"


def _matcher_message(name: str, matcher: Matcher, actual: Any) -> str:
    return f"Response header '{name}'\nExpected: {matcher.describe()}\n     but: {matcher.describe_mismatch(actual)}"


def _require_value(response: CapturedResponse, name: str) -> str:
    value = response.headers.first(name)
    if value is None:
        raise HeaderMissingError(f"Response does not contain header '{name}'", name=name)
    return value


def assert_string(response: CapturedResponse, name: str, expected: Any) -> None:
    """Assert the first value of a header.

    A literal is compared for equality. ``None`` or a matcher is evaluated
    against the actual value, which is ``None`` when the header is absent.
    """
    actual = response.headers.first(name)

    if is_matcher(expected) or expected is None or callable(expected):
        matcher = as_matcher(expected)
        if not matcher.matches(actual):
            raise HeaderMismatchError(_matcher_message(name, matcher, actual), name=name, expected=matcher, actual=actual)
        return

    if actual != expected:
        raise HeaderMismatchError(_mismatch_message(name, expected, actual), name=name, expected=expected, actual=actual)


def assert_string_values(response: CapturedResponse, name: str, *expected: Any) -> None:
    """Assert every value of a header, in order.

    Pass the expected values, or a single matcher applied to the value list.
    With no expected values the header must be absent.
    """
    actual = response.headers.get_all(name)

    if len(expected) == 1 and (is_matcher(expected[0]) or callable(expected[0])):
        matcher = as_matcher(expected[0])
        if not matcher.matches(actual):
            raise HeaderMismatchError(_matcher_message(name, matcher, actual), name=name, expected=matcher, actual=actual)
        return

    expected_values = list(expected)
    if actual != expected_values:
        raise HeaderMismatchError(
            _mismatch_message(name, expected_values, actual),
            name=name,
            expected=expected_values,
            actual=actual,
        )


def assert_date_value(response: CapturedResponse, name: str, expected: int) -> None:
    """Assert a header holding an HTTP-date, at second precision."""
    value = _require_value(response, name)
    actual = parse_http_date(value, name=name)

    if actual != truncate_to_seconds(expected):
        formatted = format_http_date(expected)
        raise HeaderMismatchError(
            f"Response header '{name}'='{value}' does not match expected value '{formatted}'",
            name=name,
            expected=formatted,
            actual=value,
        )


def assert_long_value(response: CapturedResponse, name: str, expected: int) -> None:
    value = _require_value(response, name)

    if not INTEGER_PATTERN.fullmatch(value.strip()):
        raise HeaderMismatchError(f"Response header '{name}'='{value}' is not a valid integer", name=name, expected=expected, actual=value)

    actual = int(value.strip())

    if actual != expected:
        raise HeaderMismatchError(_mismatch_message(name, expected, actual), name=name, expected=expected, actual=actual)


def assert_exists(response: CapturedResponse, name: str) -> None:
    if name not in response.headers:
        raise HeaderMissingError(f"Response should contain header '{name}'", name=name)


def assert_does_not_exist(response: CapturedResponse, name: str) -> None:
    if name in response.headers:
        raise HeaderMismatchError(
            f"Response should not contain header '{name}'",
            name=name,
            actual=response.headers.get_all(name),
        )


def assert_status(response: CapturedResponse, expected: int) -> None:
    if response.status_code != expected:
        raise StatusMismatchError(
            f"Status expected:<{expected}> but was:<{response.status_code}>",
            expected=expected,
            actual=response.status_code,
        )


def verify(response: CapturedResponse, assertion: Assertion) -> None:
    """Evaluate one assertion against the response."""
    logger.debug(f"Evaluating {assertion!r}")
    try:
        match assertion:
            case StringEquals(name=name, expected=expected):
                assert_string(response, name, expected)
            case MultiValueEquals(name=name, expected=expected):
                if isinstance(expected, tuple):
                    assert_string_values(response, name, *expected)
                else:
                    assert_string_values(response, name, expected)
            case DateEquals(name=name, expected=expected):
                assert_date_value(response, name, expected)
            case LongEquals(name=name, expected=expected):
                assert_long_value(response, name, expected)
            case Exists(name=name):
                assert_exists(response, name)
            case DoesNotExist(name=name):
                assert_does_not_exist(response, name)
            case StatusEquals(expected=expected):
                assert_status(response, expected)
            case _:
                raise TypeError(f"Unsupported assertion: {assertion!r}")
    except AssertionError as e:
        logger.info(f"Assertion failed: {e}")
        raise


def verify_all(response: CapturedResponse, assertions: Iterable[Assertion]) -> None:
    """Evaluate assertions in order, stopping at the first failure."""
    for assertion in assertions:
        verify(response, assertion)
