from typing import Any, Self

import httpx
import requests
from pydantic import BaseModel, ConfigDict, Field

from .headers import HeaderMap


class CapturedResponse(BaseModel):
    """Immutable snapshot of one HTTP response under test."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status_code: int = Field(ge=100, le=599)
    headers: HeaderMap = Field(default_factory=HeaderMap)
    content: bytes = b""
    reason: str = ""
    http_version: str = "HTTP/1.1"

    @classmethod
    def build(cls, status_code: int, headers: Any = None, content: bytes | str = b"", **kwargs: Any) -> Self:
        """Build a snapshot from plain values; ``headers`` may map names to a string or a list of strings."""
        if isinstance(content, str):
            content = content.encode()
        return cls(status_code=status_code, headers=HeaderMap(headers), content=content, **kwargs)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Self:
        return cls(
            status_code=response.status_code,
            headers=HeaderMap(response.headers),
            content=response.read(),
            reason=response.reason_phrase,
            http_version=response.http_version,
        )

    @classmethod
    def from_requests(cls, response: requests.Response) -> Self:
        # requests folds repeated header lines into one comma-joined value; the urllib3 headers keep them apart
        raw_headers = getattr(getattr(response, "raw", None), "headers", None)
        if raw_headers is not None and hasattr(raw_headers, "getlist"):
            headers = HeaderMap([(name, value) for name in raw_headers for value in raw_headers.getlist(name)])
        else:
            headers = HeaderMap(list(response.headers.items()))

        return cls(
            status_code=response.status_code,
            headers=headers,
            content=response.content or b"",
            reason=response.reason or "",
        )

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
