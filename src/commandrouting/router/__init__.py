from commandrouting.router.activator import RequestModelActivator
from commandrouting.router.body_readers import BodyReader, JsonBodyReader
from commandrouting.router.command_module import CommandModule
from commandrouting.router.value_parsers import QueryStringValueParser, RouteValueParser, ValueParser

__all__ = [
    "RequestModelActivator",
    "BodyReader",
    "JsonBodyReader",
    "CommandModule",
    "ValueParser",
    "RouteValueParser",
    "QueryStringValueParser",
]
