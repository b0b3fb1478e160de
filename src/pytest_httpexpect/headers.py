"""Case-insensitive multi-valued header mapping.

Header names compare case-insensitively and keep the order in which they were
received. Each name maps to every value sent for it, so a header repeated on
the wire (``Vary: foo`` followed by ``Vary: bar``) yields both values.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import httpx
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

HeaderItems = Mapping[str, str | Iterable[str]] | Iterable[tuple[str, str]]

# values given as text may hold any character; they are stored as UTF-8 and decoded back unchanged
HEADERS_ENCODING = "utf-8"


class HeaderMap(Mapping[str, tuple[str, ...]]):
    """Read-only view of response headers backed by ``httpx.Headers``."""

    __slots__ = ("_headers",)

    def __init__(self, headers: HeaderItems | httpx.Headers | None = None):
        match headers:
            case None:
                self._headers = httpx.Headers(encoding=HEADERS_ENCODING)
            case HeaderMap():
                self._headers = httpx.Headers(headers._headers.raw, encoding=headers._headers.encoding)
            case httpx.Headers():
                self._headers = httpx.Headers(headers.raw, encoding=headers.encoding)
            case Mapping():
                self._headers = httpx.Headers(_encode(_expand(headers)), encoding=HEADERS_ENCODING)
            case _:
                self._headers = httpx.Headers(_encode(headers), encoding=HEADERS_ENCODING)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        if name not in self._headers:
            raise KeyError(name)
        return tuple(self._headers.get_list(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._headers

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self.raw_items():
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield name

    def __len__(self) -> int:
        return len({name.lower() for name, _ in self._headers.multi_items()})

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return self.multi_items() == other.multi_items()

    def __hash__(self) -> int:
        return hash(tuple(self.multi_items()))

    def __repr__(self) -> str:
        return f"HeaderMap({self.multi_items()!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(cls)

    def first(self, name: str) -> str | None:
        """Return the first value of ``name``, or ``None`` when it is absent."""
        values = self._headers.get_list(name)
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        """Return every value of ``name`` in received order; empty when absent."""
        return self._headers.get_list(name)

    def multi_items(self) -> list[tuple[str, str]]:
        return [(name.lower(), value) for name, value in self._headers.multi_items()]

    def raw_items(self) -> list[tuple[str, str]]:
        """Return name/value pairs with header names as they were received."""
        encoding = self._headers.encoding
        return [(name.decode(encoding), value.decode(encoding)) for name, value in self._headers.raw]


def _expand(headers: Mapping[str, str | Iterable[str]]) -> Iterator[tuple[str, str]]:
    for name, value in headers.items():
        if isinstance(value, str):
            yield name, value
        else:
            for item in value:
                yield name, item


def _encode(items: Iterable[tuple[str | bytes, str | bytes]]) -> list[tuple[bytes, bytes]]:
    return [
        (
            name if isinstance(name, bytes) else name.encode(HEADERS_ENCODING),
            value if isinstance(value, bytes) else value.encode(HEADERS_ENCODING),
        )
        for name, value in items
    ]
