import logging
from collections.abc import Callable, Mapping
from typing import Any, Self

import httpx

from .constants import DEFAULT_BASE_URL
from .exceptions import DispatchError
from .response import CapturedResponse
from .result_matchers import ResultActions

logger = logging.getLogger(__name__)

WSGIApp = Callable[..., Any]


class MockClient:
    """Performs requests against an in-process WSGI application.

    No socket is opened: requests go through ``httpx.WSGITransport`` and every
    response is captured as a :class:`CapturedResponse` wrapped in
    :class:`ResultActions` for chained expectations.
    """

    def __init__(self, app: WSGIApp, base_url: str = DEFAULT_BASE_URL, follow_redirects: bool = False):
        self._client = httpx.Client(
            transport=httpx.WSGITransport(app=app),
            base_url=base_url,
            follow_redirects=follow_redirects,
        )
        self.last_response: CapturedResponse | None = None

    def perform(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> ResultActions:
        logger.info(f"Performing {method.upper()} {url}")
        try:
            response = self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise DispatchError(f"HTTP request failed: {str(e)}") from None
        except Exception as e:
            raise DispatchError(f"Application raised {type(e).__name__}: {str(e)}") from e

        captured = CapturedResponse.from_httpx(response)
        self.last_response = captured
        logger.info(f"{method.upper()} {url} returned {captured.status_code}")
        return ResultActions(captured)

    def get(self, url: str, **kwargs: Any) -> ResultActions:
        return self.perform("GET", url, **kwargs)

    def head(self, url: str, **kwargs: Any) -> ResultActions:
        return self.perform("HEAD", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> ResultActions:
        return self.perform("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> ResultActions:
        return self.perform("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> ResultActions:
        return self.perform("DELETE", url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
