"""Errors raised while inspecting handlers and binding request models."""
from __future__ import annotations

from typing import Any


class CommandRoutingError(Exception):
    """Base error. code is a stable identifier used in HTTP error envelopes."""

    code = "COMMAND_ROUTING_ERROR"


class ContractNotImplementedError(CommandRoutingError, TypeError):
    """Type does not implement CommandHandler[Request, Response]."""

    code = "CONTRACT_NOT_IMPLEMENTED"

    def __init__(self, handler_type: Any, reason: str = "does not implement CommandHandler[Request, Response]") -> None:
        self.handler_type = handler_type
        name = getattr(handler_type, "__qualname__", repr(handler_type))
        super().__init__(f"{name} {reason}")


class BodyParseError(CommandRoutingError, ValueError):
    """Request body could not be parsed for its declared content type."""

    code = "BODY_PARSE_ERROR"

    def __init__(self, content_type: str, message: str) -> None:
        self.content_type = content_type
        super().__init__(f"cannot parse {content_type or 'request'} body: {message}")


class ModelBindingError(CommandRoutingError, ValueError):
    """A raw value could not be converted to the declared property type."""

    code = "MODEL_BINDING_ERROR"

    def __init__(self, property_name: str, raw_value: Any, target: Any) -> None:
        self.property_name = property_name
        self.raw_value = raw_value
        self.target = target
        target_name = getattr(target, "__name__", repr(target))
        super().__init__(f"cannot bind {raw_value!r} to property {property_name!r} ({target_name})")
