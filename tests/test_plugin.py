"""Integration tests for the pytest plugin."""

from pytest_httpexpect import CapturedResponse
from pytest_httpexpect.report_formatter import format_response

APP_CONFTEST = """
import pytest
from werkzeug.wrappers import Request, Response


@Request.application
def app(request):
    response = Response("hello", content_type="text/plain")
    response.headers["X-Host"] = request.host
    response.headers.add("Vary", "foo")
    response.headers.add("Vary", "bar")
    return response


@pytest.fixture
def wsgi_app():
    return app
"""


def test_mock_client_fixture(pytester):
    pytester.makeconftest(APP_CONFTEST)
    pytester.makepyfile(
        """
        from pytest_httpexpect import header, status

        def test_vary(mock_client):
            mock_client.get("/").and_expect(status().is_ok(), header().string_values("Vary", "foo", "bar"))
        """
    )

    result = pytester.runpytest()
    result.assert_outcomes(passed=1, failed=0)


def test_failed_assertion_adds_response_section(pytester):
    pytester.makeconftest(APP_CONFTEST)
    pytester.makepyfile(
        """
        from pytest_httpexpect import header

        def test_missing(mock_client):
            mock_client.get("/").and_expect(header().long_value("X-Custom-Header", 99))
        """
    )

    result = pytester.runpytest()
    result.assert_outcomes(passed=0, failed=1)

    output = result.stdout.str()
    assert "Response does not contain header 'X-Custom-Header'" in output
    assert "HTTP Response" in output
    assert "Vary: foo" in output


def test_base_url_option(pytester):
    pytester.makeconftest(APP_CONFTEST)
    pytester.makeini(
        """
        [pytest]
        httpexpect_base_url = http://example.org
        """
    )
    pytester.makepyfile(
        """
        from pytest_httpexpect import header

        def test_host(mock_client):
            mock_client.get("/").and_expect(header().string("X-Host", "example.org"))
        """
    )

    result = pytester.runpytest()
    result.assert_outcomes(passed=1)


def test_invalid_base_url_option(pytester):
    pytester.makeini(
        """
        [pytest]
        httpexpect_base_url = /relative
        """
    )
    pytester.makepyfile("def test_nothing(): pass")

    result = pytester.runpytest_subprocess()

    assert result.ret != 0
    assert "Base URL must be an absolute http(s) URL, got '/relative'" in "\n".join(result.outlines + result.errlines)


def test_missing_wsgi_app_fixture(pytester):
    pytester.makepyfile(
        """
        def test_client(mock_client):
            pass
        """
    )

    result = pytester.runpytest()
    result.assert_outcomes(errors=1)
    assert "Define a 'wsgi_app' fixture" in result.stdout.str()


def test_format_response():
    response = CapturedResponse.build(
        200,
        headers=[("Content-Type", "application/json"), ("Vary", "foo"), ("Vary", "bar")],
        content=b'{"name": "Jason"}',
        reason="OK",
    )

    assert format_response(response) == "\n".join(
        [
            "HTTP/1.1 200 OK",
            "Content-Type: application/json",
            "Vary: foo",
            "Vary: bar",
            "",
            "{",
            '  "name": "Jason"',
            "}",
        ]
    )


def test_format_response_binary_body():
    response = CapturedResponse.build(304, content=b"\xff\xfe")

    assert format_response(response) == "HTTP/1.1 304\n\n<Binary content: 2 bytes>"
