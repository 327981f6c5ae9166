"""
RequestModelActivator — builds a command request model from an HTTP request.
Body fields and value-parser values are merged; parser values win.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from commandrouting.core.config import Config
from commandrouting.core.request import Request
from commandrouting.router.binding import convert_value, model_properties, zero_value
from commandrouting.router.body_readers import BodyReader
from commandrouting.router.value_parsers import ValueParser

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RequestModelActivator:
    """
    One activator per request. create_request_model() reads the body (if the method
    and content type call for it), then binds every model property from, in order:
    the first value parser that has the name, a body field with the same name
    (case-insensitive), or the property's default.
    """

    def __init__(
        self,
        request: Request,
        body_reader: BodyReader,
        value_parsers: Sequence[ValueParser] = (),
        config: Config | None = None,
    ) -> None:
        self._request = request
        self._body_reader = body_reader
        self._value_parsers = list(value_parsers)
        self._config = config or Config()

    async def read_body_fields(self) -> dict[str, Any]:
        """Body as casefolded field name -> value. Empty when there is no body to read."""
        request = self._request
        if not self._config.allows_body(request.method) or not self._body_reader.can_read(request.content_type):
            return {}
        body = await request.body()
        parsed = self._body_reader.read(request.content_type, body)
        logger.debug("read %d body field(s) from %s %s", len(parsed), request.method, request.content_type)
        fields: dict[str, Any] = {}
        for key, value in parsed.items():
            fields.setdefault(str(key).casefold(), value)
        return fields

    async def create_request_model(self, model_type: type[T]) -> T:
        body_fields = await self.read_body_fields()
        return self.bind(model_type, body_fields)

    def bind(self, model_type: type[T], body_fields: Mapping[str, Any]) -> T:
        """Bind from already-read body fields (keys casefolded). All-or-nothing."""
        values: dict[str, Any] = {}
        properties = model_properties(model_type)
        for name, declared in properties.items():
            raw = self._from_parsers(name)
            if raw is None:
                raw = body_fields.get(name.casefold())
            if raw is None:
                continue
            values[name] = convert_value(name, raw, declared)
        model = model_type()
        for name, value in values.items():
            setattr(model, name, value)
        for name, declared in properties.items():
            # annotation-only attributes the constructor never set
            if name not in values and not hasattr(model, name):
                setattr(model, name, zero_value(declared))
        logger.debug("bound %s: %s", model_type.__name__, sorted(values))
        return model

    def _from_parsers(self, name: str) -> str | None:
        for parser in self._value_parsers:
            value = parser.try_get(name)
            if value is not None:
                return value
        return None
