"""HTTP-date formatting and parsing.

Values are epoch milliseconds. HTTP-dates carry whole seconds only, so every
conversion truncates to the second.
"""

import calendar
import re
from email.utils import formatdate, parsedate_tz

from .exceptions import HeaderDateParseError

# asctime form, the only HTTP-date without a zone: "Sun Nov  6 08:49:37 1994"
ASCTIME_PATTERN = re.compile(r"[A-Za-z]{3} [A-Za-z]{3} [ \d]\d \d{2}:\d{2}:\d{2} \d{4}", re.ASCII)


def truncate_to_seconds(epoch_millis: int) -> int:
    return epoch_millis - epoch_millis % 1000


def format_http_date(epoch_millis: int) -> str:
    """Format epoch milliseconds as an RFC 1123 date in GMT.

    Example output: 'Wed, 01 Jan 2020 00:00:00 GMT'
    """
    return formatdate(timeval=epoch_millis // 1000, localtime=False, usegmt=True)


def parse_http_date(value: str, name: str | None = None) -> int:
    """Parse an HTTP-date into epoch milliseconds.

    RFC 1123 is the preferred form; the obsolete RFC 850 and asctime forms
    are accepted as well.

    Args:
        value: Header value to parse
        name: Header name, used in the failure message

    Returns:
        Epoch milliseconds, always a whole number of seconds

    Raises:
        HeaderDateParseError: If the value is not a valid HTTP-date
    """
    try:
        parsed = parsedate_tz(value)
    except (TypeError, ValueError, IndexError):
        parsed = None

    if parsed is None or (parsed[9] is None and not ASCTIME_PATTERN.fullmatch(value.strip())):
        subject = f"Response header '{name}'='{value}'" if name else f"'{value}'"
        raise HeaderDateParseError(f"{subject} is not a valid HTTP-date", name=name, actual=value)

    offset = parsed[9] or 0
    return (calendar.timegm(parsed[:6]) - offset) * 1000
