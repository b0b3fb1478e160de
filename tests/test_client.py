import logging

import pytest
from werkzeug.wrappers import Request, Response

from pytest_httpexpect import DispatchError, MockClient, ResultActions, header, status


@Request.application
def echo_app(request):
    response = Response(request.get_data(), status=201 if request.method == "POST" else 200)
    response.headers["X-Method"] = request.method
    response.headers["X-Path"] = request.path
    if "X-Token" in request.headers:
        response.headers["X-Token"] = request.headers["X-Token"]
    return response


def failing_app(environ, start_response):
    raise RuntimeError("boom")


@pytest.fixture
def client():
    with MockClient(echo_app) as client:
        yield client


@pytest.mark.parametrize("method", ["get", "head", "put", "delete"])
def test_shortcuts(client, method):
    actions = getattr(client, method)("/items/7")

    assert isinstance(actions, ResultActions)
    actions.and_expect(
        status().is_ok(),
        header().string("X-Method", method.upper()),
        header().string("X-Path", "/items/7"),
    )


def test_post_with_body(client):
    response = client.post("/items", content=b"payload").and_expect(status().is_created()).and_return()

    assert response.content == b"payload"


def test_request_headers_are_sent(client):
    client.get("/", headers={"X-Token": "secret"}).and_expect(header().string("X-Token", "secret"))


def test_last_response_is_recorded(client):
    assert client.last_response is None

    client.get("/first")
    client.get("/second")

    assert client.last_response.headers.first("X-Path") == "/second"


def test_application_error():
    with MockClient(failing_app) as client:
        with pytest.raises(DispatchError) as exc_info:
            client.get("/")

    assert str(exc_info.value) == "Application raised RuntimeError: boom"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="pytest_httpexpect.client"):
        client.get("/logged")

    assert "Performing GET /logged" in caplog.text
    assert "GET /logged returned 200" in caplog.text
