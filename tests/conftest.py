import json

import pytest
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from pytest_httpexpect import format_http_date
from pytest_httpexpect.dates import truncate_to_seconds

pytest_plugins = ["pytester"]

# Wed, 01 Jan 2020 00:00:00.123 GMT
CURRENT_TIME = 1577836800123


def create_person_app(timestamp: int):
    """Stand-in endpoint serving a person with Last-Modified support."""
    url_map = Map([Rule("/persons/<int:person_id>", endpoint="person")])
    last_modified = format_http_date(timestamp)

    @Request.application
    def app(request: Request) -> Response:
        adapter = url_map.bind_to_environ(request.environ)
        adapter.match()

        if_modified_since = request.if_modified_since
        if if_modified_since is not None and if_modified_since.timestamp() * 1000 >= truncate_to_seconds(timestamp):
            response = Response(status=304)
        else:
            response = Response(json.dumps({"name": "Jason"}), content_type="application/json")

        response.headers["X-Rate-Limiting"] = "42"
        response.headers["Last-Modified"] = last_modified
        response.headers.add("Vary", "foo")
        response.headers.add("Vary", "bar")
        return response

    return app


@pytest.fixture
def current_time() -> int:
    return CURRENT_TIME


@pytest.fixture
def now(current_time) -> str:
    return format_http_date(current_time)


@pytest.fixture
def minute_ago(current_time) -> str:
    return format_http_date(current_time - 60 * 1000)


@pytest.fixture
def second_later(current_time) -> str:
    return format_http_date(current_time + 1000)


@pytest.fixture
def wsgi_app(current_time):
    return create_person_app(current_time)
