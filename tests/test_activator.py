"""
Tests for RequestModelActivator.

Tests cover:
- Binding from a JSON body
- Binding from route values
- Merging body and route values (route wins)
- Defaults, idempotence, atomic failure
"""
from dataclasses import dataclass
from typing import Optional

import pytest

from commandrouting import (
    BodyParseError,
    Config,
    JsonBodyReader,
    ModelBindingError,
    QueryStringValueParser,
    Request,
    RequestModelActivator,
    RouteValueParser,
)


@dataclass
class Foo:
    name: str = ""
    ranking: int = 0


@dataclass
class Order:
    order_id: str = ""
    quantity: int = 1
    price: float = 0.0
    express: bool = False
    note: Optional[str] = None


class PlainModel:
    name: str
    ranking: int

    def __init__(self):
        self.name = "unset"
        self.ranking = -1


class StaticParser:
    def __init__(self, **values):
        self.values = values
        self.calls = []

    def try_get(self, name):
        self.calls.append(name)
        return self.values.get(name)


@pytest.mark.asyncio
async def test_creates_model_from_json_body(make_activator):
    activator = make_activator("POST", "{ name: 'Bar', ranking: 10 }")

    result = await activator.create_request_model(Foo)

    assert result.name == "Bar"
    assert result.ranking == 10


@pytest.mark.asyncio
async def test_creates_model_from_route_values(make_activator):
    activator = make_activator("GET", "", {"name": "Bar", "Ranking": "10"})

    result = await activator.create_request_model(Foo)

    assert result.name == "Bar"
    assert result.ranking == 10


@pytest.mark.asyncio
async def test_route_value_overrides_body_value(make_activator):
    activator = make_activator("POST", "{ name: 'Bar', ranking: 10 }", {"Ranking": "42"})

    result = await activator.create_request_model(Foo)

    assert result.name == "Bar"
    assert result.ranking == 42


@pytest.mark.asyncio
async def test_strict_json_body(make_activator):
    activator = make_activator("PUT", '{"Name": "Baz", "RANKING": 3}')

    result = await activator.create_request_model(Foo)

    assert result == Foo(name="Baz", ranking=3)


@pytest.mark.asyncio
async def test_same_inputs_give_equal_models(json_reader):
    def activator():
        request = Request("POST", content_type="application/json", body=b"{ name: 'Bar' }", route_values={"ranking": "7"})
        return RequestModelActivator(request, json_reader, [RouteValueParser(request.route_values)])

    first = await activator().create_request_model(Foo)
    second = await activator().create_request_model(Foo)

    assert first == second
    assert first is not second


@pytest.mark.asyncio
async def test_activating_twice_from_one_request(json_reader):
    request = Request("POST", content_type="application/json", body=b"{ name: 'Bar', ranking: 10 }")
    activator = RequestModelActivator(request, json_reader)

    assert await activator.create_request_model(Foo) == await activator.create_request_model(Foo)


@pytest.mark.asyncio
async def test_unsupplied_properties_keep_defaults(make_activator):
    result = await make_activator("POST", "{ order_id: 'A1' }").create_request_model(Order)

    assert result == Order(order_id="A1", quantity=1, price=0.0, express=False, note=None)


@pytest.mark.asyncio
async def test_empty_body_is_not_an_error(make_activator):
    result = await make_activator("POST", "  ").create_request_model(Foo)

    assert result == Foo()


@pytest.mark.asyncio
async def test_get_body_is_ignored(make_activator):
    result = await make_activator("GET", "{ name: 'Bar' }").create_request_model(Foo)

    assert result.name == ""


@pytest.mark.asyncio
async def test_unsupported_content_type_body_is_ignored(make_activator):
    activator = make_activator("POST", "name=Bar", content_type="application/x-www-form-urlencoded")

    assert await activator.create_request_model(Foo) == Foo()


@pytest.mark.asyncio
async def test_content_type_parameters_ignored(make_activator):
    activator = make_activator("POST", "{ name: 'Bar' }", content_type="application/json; charset=utf-8")

    assert (await activator.create_request_model(Foo)).name == "Bar"


@pytest.mark.asyncio
async def test_converts_route_strings_to_declared_types(make_activator):
    route = {"order_id": "A1", "quantity": "3", "price": "9.5", "express": "true", "note": "rush"}

    result = await make_activator("GET", "", route).create_request_model(Order)

    assert result == Order(order_id="A1", quantity=3, price=9.5, express=True, note="rush")


@pytest.mark.asyncio
async def test_plain_class_with_annotations(make_activator):
    result = await make_activator("POST", "{ name: 'Bar' }", {"ranking": "5"}).create_request_model(PlainModel)

    assert isinstance(result, PlainModel)
    assert result.name == "Bar"
    assert result.ranking == 5


@pytest.mark.asyncio
async def test_first_parser_wins(json_reader):
    first = StaticParser(ranking="1")
    second = StaticParser(ranking="2", name="Second")
    request = Request("GET")
    activator = RequestModelActivator(request, json_reader, [first, second])

    result = await activator.create_request_model(Foo)

    assert result.ranking == 1
    assert result.name == "Second"


@pytest.mark.asyncio
async def test_query_parser_after_route_parser(json_reader):
    request = Request("GET", route_values={"name": "route"}, query_params={"name": "query", "ranking": "4"})
    parsers = [RouteValueParser(request.route_values), QueryStringValueParser(request.query_params)]

    result = await RequestModelActivator(request, json_reader, parsers).create_request_model(Foo)

    assert result == Foo(name="route", ranking=4)


@pytest.mark.asyncio
async def test_malformed_body_raises_parse_error(make_activator):
    with pytest.raises(BodyParseError):
        await make_activator("POST", "{ name: ").create_request_model(Foo)


@pytest.mark.asyncio
async def test_bad_route_value_raises_binding_error(make_activator):
    with pytest.raises(ModelBindingError) as exc_info:
        await make_activator("GET", "", {"ranking": "ten"}).create_request_model(Foo)

    assert exc_info.value.property_name == "ranking"
    assert exc_info.value.raw_value == "ten"


@pytest.mark.asyncio
async def test_binding_error_creates_no_model(json_reader):
    created = []

    @dataclass
    class Tracked:
        name: str = ""
        ranking: int = 0

        def __post_init__(self):
            created.append(self)

    request = Request("POST", content_type="application/json", body=b"{ name: 'Bar', ranking: 'x' }")
    with pytest.raises(ModelBindingError):
        await RequestModelActivator(request, json_reader).create_request_model(Tracked)

    assert created == []


@pytest.mark.asyncio
async def test_route_values_not_mutated(make_activator):
    route = {"Ranking": "42"}
    await make_activator("POST", "{ name: 'Bar', ranking: 10 }", route).create_request_model(Foo)

    assert route == {"Ranking": "42"}


@pytest.mark.asyncio
async def test_body_methods_from_config(json_reader):
    request = Request("POST", content_type="application/json", body=b"{ name: 'Bar' }")
    activator = RequestModelActivator(request, json_reader, config=Config(body_methods=("PUT",)))

    assert (await activator.create_request_model(Foo)).name == ""


@pytest.mark.asyncio
async def test_custom_body_reader():
    class FormReader:
        def can_read(self, content_type):
            return content_type == "text/plain"

        def read(self, content_type, body):
            return dict(pair.split("=") for pair in body.decode().split("&"))

    request = Request("POST", content_type="text/plain", body=b"name=Bar&ranking=8")

    result = await RequestModelActivator(request, FormReader()).create_request_model(Foo)

    assert result == Foo(name="Bar", ranking=8)


@pytest.mark.asyncio
async def test_async_body_stream(json_reader):
    async def chunks():
        yield b"{ name: "
        yield b"'Bar', ranking: 10 }"

    request = Request("POST", content_type="application/json", body=chunks())

    assert await RequestModelActivator(request, json_reader).create_request_model(Foo) == Foo("Bar", 10)


@pytest.mark.asyncio
async def test_vendor_json_media_type(json_reader):
    request = Request("PATCH", content_type="application/vnd.api+json", body=b'{"name": "Bar"}')

    assert (await RequestModelActivator(request, JsonBodyReader()).create_request_model(Foo)).name == "Bar"


class AnnotationsOnly:
    name: str
    ranking: int
    score: float
    tags: list
    note: Optional[str]


class PropertyModel:
    def __init__(self):
        self._name = ""
        self._ranking = 0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def ranking(self) -> int:
        return self._ranking

    @ranking.setter
    def ranking(self, value: int) -> None:
        self._ranking = value

    @property
    def label(self) -> str:
        return f"{self._name}#{self._ranking}"


@pytest.mark.asyncio
async def test_annotation_only_model_gets_type_defaults(make_activator):
    result = await make_activator("POST", "{ name: 'Bar' }").create_request_model(AnnotationsOnly)

    assert result.name == "Bar"
    assert result.ranking == 0
    assert result.score == 0.0
    assert result.tags == []
    assert result.note is None


@pytest.mark.asyncio
async def test_settable_properties_are_bound(make_activator):
    result = await make_activator("POST", "{ name: 'Bar', ranking: 10, label: 'ignored' }", {"Ranking": "42"}).create_request_model(
        PropertyModel
    )

    assert result.name == "Bar"
    assert result.ranking == 42
    assert result.label == "Bar#42"
