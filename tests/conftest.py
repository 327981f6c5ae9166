"""
Pytest configuration for commandrouting tests.

Shared body reader and activator builders.
"""
import io

import pytest

from commandrouting import JsonBodyReader, Request, RequestModelActivator, RouteValueParser


@pytest.fixture
def json_reader():
    return JsonBodyReader()


@pytest.fixture
def make_activator(json_reader):
    """Build an activator for a request with the given method, body and route values."""

    def _make(method="POST", body=b"", route_values=None, content_type="application/json"):
        request = Request(
            method,
            content_type=content_type,
            body=io.BytesIO(body.encode("utf-8") if isinstance(body, str) else body),
            route_values=route_values,
        )
        return RequestModelActivator(request, json_reader, [RouteValueParser(request.route_values)])

    return _make
