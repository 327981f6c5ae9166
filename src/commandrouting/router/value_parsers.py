"""Value parsers: named string values from non-body request data."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from commandrouting.core.request import RouteValues


@runtime_checkable
class ValueParser(Protocol):
    """Source of raw values by property name. Returns None when the name is absent."""

    def try_get(self, name: str) -> Optional[str]:
        ...


class RouteValueParser:
    """Values captured by the matched route template, e.g. /orders/{order_id}."""

    def __init__(self, route_values: Mapping[str, Any] | None) -> None:
        self._values = route_values if isinstance(route_values, RouteValues) else RouteValues(route_values)

    def try_get(self, name: str) -> Optional[str]:
        return self._values.get(name)


class QueryStringValueParser(RouteValueParser):
    """Query-string parameters. Same lookup rules as route values."""
