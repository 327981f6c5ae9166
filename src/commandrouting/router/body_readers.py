"""Body readers: turn a request body into a field -> value mapping."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Protocol, runtime_checkable

import json5

from commandrouting.core.config import DEFAULT_JSON_MEDIA_TYPES
from commandrouting.core.errors import BodyParseError


def media_type(content_type: str) -> str:
    """'application/json; charset=utf-8' -> 'application/json'."""
    return (content_type or "").split(";", 1)[0].strip().lower()


@runtime_checkable
class BodyReader(Protocol):
    """Parses bodies of the content types it accepts. Raises BodyParseError on bad input."""

    def can_read(self, content_type: str) -> bool:
        ...

    def read(self, content_type: str, body: bytes) -> Mapping[str, Any]:
        ...


class JsonBodyReader:
    """
    JSON object bodies. Parsing is lenient (JSON5): unquoted keys, single quotes
    and trailing commas are accepted, so { name: 'Bar', ranking: 10 } reads fine.
    Accepts the configured media types plus any '+json' suffix type.
    """

    def __init__(self, media_types: Iterable[str] = DEFAULT_JSON_MEDIA_TYPES, encoding: str = "utf-8") -> None:
        self.media_types = frozenset(m.lower() for m in media_types)
        self.encoding = encoding

    def can_read(self, content_type: str) -> bool:
        mt = media_type(content_type)
        return mt in self.media_types or mt.endswith("+json")

    def read(self, content_type: str, body: bytes) -> Mapping[str, Any]:
        try:
            text = body.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise BodyParseError(content_type, str(e)) from e
        if not text.strip():
            return {}
        try:
            data = json5.loads(text)
        except (ValueError, RecursionError) as e:
            raise BodyParseError(content_type, str(e)) from e
        if not isinstance(data, dict):
            raise BodyParseError(content_type, f"expected an object, got {type(data).__name__}")
        return data
