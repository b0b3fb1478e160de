import pytest

from pytest_httpexpect import HeaderDateParseError, format_http_date, parse_http_date
from pytest_httpexpect.dates import truncate_to_seconds


@pytest.mark.parametrize(
    "epoch_millis,expected",
    [
        (0, "Thu, 01 Jan 1970 00:00:00 GMT"),
        (1577836800000, "Wed, 01 Jan 2020 00:00:00 GMT"),
        (1577836800999, "Wed, 01 Jan 2020 00:00:00 GMT"),
        (784111777000, "Sun, 06 Nov 1994 08:49:37 GMT"),
    ],
)
def test_format_http_date(epoch_millis, expected):
    assert format_http_date(epoch_millis) == expected


@pytest.mark.parametrize(
    "value",
    [
        "Sun, 06 Nov 1994 08:49:37 GMT",
        "Sunday, 06-Nov-94 08:49:37 GMT",
        "Sun Nov  6 08:49:37 1994",
    ],
)
def test_parse_http_date_formats(value):
    """RFC 1123, RFC 850 and asctime forms all parse to the same instant."""
    assert parse_http_date(value) == 784111777000


def test_parse_http_date_with_offset():
    assert parse_http_date("Sun, 06 Nov 1994 09:49:37 +0100") == 784111777000


def test_format_then_parse_truncates_to_seconds():
    epoch_millis = 1577836861234
    assert parse_http_date(format_http_date(epoch_millis)) == truncate_to_seconds(epoch_millis) == 1577836861000


@pytest.mark.parametrize("value", ["", "42", "not a date", "Wed, 32 Foo 2020"])
def test_parse_http_date_invalid(value):
    with pytest.raises(HeaderDateParseError) as exc_info:
        parse_http_date(value)

    assert str(exc_info.value) == f"'{value}' is not a valid HTTP-date"
    assert exc_info.value.actual == value


def test_parse_http_date_invalid_names_header():
    with pytest.raises(HeaderDateParseError) as exc_info:
        parse_http_date("yesterday", name="Expires")

    assert str(exc_info.value) == "Response header 'Expires'='yesterday' is not a valid HTTP-date"


@pytest.mark.parametrize("value", ["Wed, 01 Jan 2020 00:00:00", "Wednesday, 01-Jan-20 00:00:00"])
def test_parse_http_date_requires_zone(value):
    with pytest.raises(HeaderDateParseError):
        parse_http_date(value)
