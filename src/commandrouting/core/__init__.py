from commandrouting.core.config import Config
from commandrouting.core.errors import (
    BodyParseError,
    CommandRoutingError,
    ContractNotImplementedError,
    ModelBindingError,
)
from commandrouting.core.request import Request, RouteValues

__all__ = [
    "Config",
    "Request",
    "RouteValues",
    "CommandRoutingError",
    "ContractNotImplementedError",
    "BodyParseError",
    "ModelBindingError",
]
