from enum import StrEnum


class ConfigOptions(StrEnum):
    """Configuration option names for the pytest-httpexpect plugin."""

    BASE_URL = "httpexpect_base_url"
    FOLLOW_REDIRECTS = "httpexpect_follow_redirects"


DEFAULT_BASE_URL = "http://testserver"
