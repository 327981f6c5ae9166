"""
commandrouting — bind HTTP requests to command handlers.
Handlers declare CommandHandler[Request, Response]; the request model is built
from the JSON body merged with route/query values, then dispatched.
"""
from commandrouting.core import (
    BodyParseError,
    CommandRoutingError,
    Config,
    ContractNotImplementedError,
    ModelBindingError,
    Request,
    RouteValues,
)
from commandrouting.handlers import (
    CommandHandler,
    HandlerResult,
    get_command_request_type,
    get_command_response_type,
)
from commandrouting.router import (
    BodyReader,
    CommandModule,
    JsonBodyReader,
    QueryStringValueParser,
    RequestModelActivator,
    RouteValueParser,
    ValueParser,
)

__all__ = [
    "CommandHandler",
    "HandlerResult",
    "get_command_request_type",
    "get_command_response_type",
    "RequestModelActivator",
    "CommandModule",
    "BodyReader",
    "JsonBodyReader",
    "ValueParser",
    "RouteValueParser",
    "QueryStringValueParser",
    "Request",
    "RouteValues",
    "Config",
    "CommandRoutingError",
    "ContractNotImplementedError",
    "BodyParseError",
    "ModelBindingError",
]
