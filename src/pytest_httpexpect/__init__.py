from .client import MockClient
from .dates import format_http_date, parse_http_date
from .engine import (
    assert_date_value,
    assert_does_not_exist,
    assert_exists,
    assert_long_value,
    assert_status,
    assert_string,
    assert_string_values,
    verify,
    verify_all,
)
from .entities import (
    DateEquals,
    DoesNotExist,
    Exists,
    HeaderAssertion,
    LongEquals,
    MultiValueEquals,
    StatusEquals,
    StringEquals,
    parse_assertions,
)
from .exceptions import (
    DispatchError,
    HeaderAssertionError,
    HeaderDateParseError,
    HeaderMismatchError,
    HeaderMissingError,
    StatusMismatchError,
)
from .headers import HeaderMap
from .response import CapturedResponse
from .result_matchers import ResultActions, header, status

__all__ = [
    "CapturedResponse",
    "DateEquals",
    "DispatchError",
    "DoesNotExist",
    "Exists",
    "HeaderAssertion",
    "HeaderAssertionError",
    "HeaderDateParseError",
    "HeaderMap",
    "HeaderMismatchError",
    "HeaderMissingError",
    "LongEquals",
    "MockClient",
    "MultiValueEquals",
    "ResultActions",
    "StatusEquals",
    "StatusMismatchError",
    "StringEquals",
    "assert_date_value",
    "assert_does_not_exist",
    "assert_exists",
    "assert_long_value",
    "assert_status",
    "assert_string",
    "assert_string_values",
    "format_http_date",
    "header",
    "parse_assertions",
    "parse_http_date",
    "status",
    "verify",
    "verify_all",
]
