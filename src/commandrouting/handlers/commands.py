"""Command contract: a handler accepts one request type and produces one response type."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar, Union

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")


@dataclass
class HandlerResult:
    """Outcome of a dispatch: HTTP status plus optional content."""

    status_code: int = 200
    content: Any = None

    @classmethod
    def ok(cls, content: Any = None) -> HandlerResult:
        return cls(200, content)

    @classmethod
    def created(cls, content: Any = None) -> HandlerResult:
        return cls(201, content)

    @classmethod
    def no_content(cls) -> HandlerResult:
        return cls(204)

    @classmethod
    def bad_request(cls, message: str) -> HandlerResult:
        return cls(400, {"error": {"code": "BAD_REQUEST", "message": message}})

    @classmethod
    def not_found(cls, message: str = "not found") -> HandlerResult:
        return cls(404, {"error": {"code": "NOT_FOUND", "message": message}})


class CommandHandler(ABC, Generic[TRequest, TResponse]):
    """
    Handler for one command. Subclass with concrete types:

        class CreateOrderHandler(CommandHandler[CreateOrder, OrderCreated]):
            async def dispatch(self, request: CreateOrder) -> HandlerResult: ...

    TRequest is the model built from the HTTP request; TResponse documents
    what the result content carries. dispatch may be sync or async.
    """

    @abstractmethod
    def dispatch(self, request: TRequest) -> Union[HandlerResult, Awaitable[HandlerResult]]:
        ...
