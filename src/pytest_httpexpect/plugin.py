"""Pytest plugin for HTTP response expectations.

Registers ini options, provides the ``mock_client`` fixture and attaches the
last captured response to the report of a failed test.
"""

import logging
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
from _pytest import config, nodes, reports, runner
from _pytest.config import argparsing

from .client import MockClient
from .constants import DEFAULT_BASE_URL, ConfigOptions
from .report_formatter import format_response

logger = logging.getLogger(__name__)


def pytest_addoption(parser: argparsing.Parser) -> None:
    """Add configuration options for the plugin.

    Registers options that can be set in pytest.ini:
    - httpexpect_base_url: Base URL for requests made by ``mock_client``
    - httpexpect_follow_redirects: Whether ``mock_client`` follows redirects

    Args:
        parser: Pytest's argument parser to add options to
    """
    parser.addini(
        name=ConfigOptions.BASE_URL,
        help="Base URL for requests performed by the mock_client fixture.",
        type="string",
        default=DEFAULT_BASE_URL,
    )
    parser.addini(
        name=ConfigOptions.FOLLOW_REDIRECTS,
        help="Whether the mock_client fixture follows redirects.",
        type="bool",
        default=False,
    )


def pytest_configure(config: config.Config) -> None:
    """Validate configuration settings.

    Raises:
        ValueError: If the base URL is not an absolute http(s) URL
    """
    base_url = str(config.getini(ConfigOptions.BASE_URL))
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid base URL '{base_url}': {str(e)}") from None

    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"Base URL must be an absolute http(s) URL, got '{base_url}'")

    logger.debug(f"mock_client base URL: {base_url}")


@pytest.fixture
def wsgi_app() -> Any:
    """The application under test; override this fixture to provide one."""
    pytest.fail("Define a 'wsgi_app' fixture returning the WSGI application to test", pytrace=False)


@pytest.fixture
def mock_client(request: pytest.FixtureRequest, wsgi_app: Any) -> Iterator[MockClient]:
    """A :class:`MockClient` bound to the ``wsgi_app`` fixture."""
    base_url = str(request.config.getini(ConfigOptions.BASE_URL))
    follow_redirects = bool(request.config.getini(ConfigOptions.FOLLOW_REDIRECTS))
    with MockClient(wsgi_app, base_url=base_url, follow_redirects=follow_redirects) as client:
        yield client


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: nodes.Item, call: runner.CallInfo[Any]) -> Any:
    """Add the last captured HTTP response to the report of a failed test."""
    outcome = yield
    report: reports.TestReport = outcome.get_result()

    if call.when == "call" and report.failed:
        client = getattr(item, "funcargs", {}).get("mock_client")
        if isinstance(client, MockClient) and client.last_response is not None:
            report.sections.append(("HTTP Response", format_response(client.last_response)))
