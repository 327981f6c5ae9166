"""Discover the request/response types a handler class binds on CommandHandler."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar, get_args, get_origin

from commandrouting.core.errors import ContractNotImplementedError
from commandrouting.handlers.commands import CommandHandler


def _bound_args(cls: type, typevars: dict[Any, Any]) -> tuple[Any, ...] | None:
    """
    Depth-first over __orig_bases__, substituting type variables bound by subclasses,
    until CommandHandler[...] is reached.
    """
    for base in cls.__dict__.get("__orig_bases__", ()):
        origin = get_origin(base) or base
        args = tuple(typevars.get(a, a) if isinstance(a, TypeVar) else a for a in get_args(base))
        if origin is CommandHandler:
            return args
        if not isinstance(origin, type) or not issubclass(origin, CommandHandler):
            continue
        params = getattr(origin, "__parameters__", ())
        found = _bound_args(origin, dict(zip(params, args)))
        if found is not None:
            return found
    for base in cls.__bases__:
        if base is not CommandHandler and issubclass(base, CommandHandler):
            found = _bound_args(base, {})
            if found is not None:
                return found
    return None


@lru_cache(maxsize=None)
def _cached_command_types(handler_type: type) -> tuple[type, type]:
    args = _bound_args(handler_type, {})
    if not args or len(args) != 2 or any(isinstance(a, TypeVar) for a in args):
        raise ContractNotImplementedError(handler_type, "does not bind both CommandHandler type parameters")
    return args[0], args[1]


def _command_types(handler_type: Any) -> tuple[type, type]:
    if not isinstance(handler_type, type) or not issubclass(handler_type, CommandHandler):
        raise ContractNotImplementedError(handler_type)
    return _cached_command_types(handler_type)


def get_command_request_type(handler_type: type) -> type:
    """Request type of CommandHandler[Request, Response] implemented by handler_type."""
    return _command_types(handler_type)[0]


def get_command_response_type(handler_type: type) -> type:
    """Response type of CommandHandler[Request, Response] implemented by handler_type."""
    return _command_types(handler_type)[1]
