"""Inbound request seen by the activator: method, content type, body, route and query values."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, AsyncIterable, BinaryIO, Union

BodySource = Union[bytes, bytearray, BinaryIO, AsyncIterable[bytes], None]


class RouteValues(Mapping[str, str]):
    """
    Ordered, case-insensitive name -> string mapping.
    Lookup ignores case; iteration yields keys as first supplied.
    """

    def __init__(self, values: Mapping[str, Any] | list[tuple[str, Any]] | None = None) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        pairs = values.items() if isinstance(values, Mapping) else (values or [])
        for key, value in pairs:
            folded = str(key).casefold()
            if folded not in self._items:
                self._items[folded] = (str(key), "" if value is None else str(value))

    def __getitem__(self, key: str) -> str:
        return self._items[key.casefold()][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._items

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RouteValues({dict(self.items())!r})"


class Request:
    """
    Request-like object: method, content_type, body, route_values, query_params.
    Body may be bytes, a binary file object or an async iterable of chunks;
    it is read once by body() and cached.
    """

    def __init__(
        self,
        method: str,
        *,
        content_type: str = "",
        body: BodySource = b"",
        route_values: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> None:
        self.method = method.upper()
        self.content_type = content_type or ""
        self._source = body
        self._body: bytes | None = None
        self.route_values = route_values if isinstance(route_values, RouteValues) else RouteValues(route_values)
        self.query_params = query_params if isinstance(query_params, RouteValues) else RouteValues(query_params)

    @classmethod
    def from_starlette(cls, request: Any) -> Request:
        """Adapt a starlette.requests.Request. The body stream is consumed later by body()."""
        return cls(
            request.method,
            content_type=request.headers.get("content-type", ""),
            body=request.stream(),
            route_values=request.path_params,
            query_params=request.query_params,
        )

    async def body(self) -> bytes:
        if self._body is None:
            self._body = await self._read(self._source)
        return self._body

    @staticmethod
    async def _read(source: BodySource) -> bytes:
        if source is None:
            return b""
        if isinstance(source, (bytes, bytearray)):
            return bytes(source)
        if hasattr(source, "__aiter__"):
            chunks = []
            async for chunk in source:  # type: ignore[union-attr]
                chunks.append(chunk)
            return b"".join(chunks)
        if hasattr(source, "read"):
            return source.read() or b""  # type: ignore[union-attr]
        raise TypeError(f"unsupported body source: {type(source).__name__}")
