"""
CommandModule — one object per group of command routes.
Attach handlers with .command(path, handler); add to a Starlette app via
register_into(app) or Starlette(routes=module.routes).
"""
from __future__ import annotations

import dataclasses
import inspect
import logging
from typing import Any, Callable

from starlette.requests import Request as StarletteRequest
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from commandrouting.core.config import Config
from commandrouting.core.errors import BodyParseError, ModelBindingError
from commandrouting.core.request import Request
from commandrouting.handlers.commands import CommandHandler, HandlerResult
from commandrouting.handlers.inspection import get_command_request_type
from commandrouting.router.activator import RequestModelActivator
from commandrouting.router.body_readers import BodyReader, JsonBodyReader
from commandrouting.router.value_parsers import QueryStringValueParser, RouteValueParser

logger = logging.getLogger(__name__)


def _jsonable(content: Any) -> Any:
    if dataclasses.is_dataclass(content) and not isinstance(content, type):
        return dataclasses.asdict(content)
    return content


def to_response(result: HandlerResult) -> Response:
    if result.status_code == 204 or (result.content is None and result.status_code != 200):
        return Response(status_code=result.status_code)
    return JSONResponse(_jsonable(result.content), status_code=result.status_code)


def _error_response(exc: BodyParseError | ModelBindingError) -> Response:
    return JSONResponse({"error": {"code": exc.code, "message": str(exc)}}, status_code=400)


class CommandModule:
    """
    Command routes under a common prefix. Each handler is a CommandHandler subclass
    (instantiated per request by handler_factory) or a ready instance.
    """

    def __init__(
        self,
        name: str,
        prefix: str | None = None,
        *,
        body_reader: BodyReader | None = None,
        config: Config | None = None,
        handler_factory: Callable[[type], Any] | None = None,
    ) -> None:
        self.name = name
        self.prefix = prefix if prefix is not None else f"/{name}"
        self.config = config or Config()
        self.body_reader = body_reader or JsonBodyReader(self.config.json_media_types, self.config.encoding)
        self._handler_factory = handler_factory or (lambda cls: cls())
        self._routes: list[Route] = []

    def command(
        self,
        path: str,
        handler: type[CommandHandler[Any, Any]] | CommandHandler[Any, Any],
        methods: list[str] | None = None,
    ) -> CommandModule:
        """Route path (relative to prefix) to handler. Request type is read from the handler's contract."""
        if methods is None:
            methods = ["POST"]
        handler_type = handler if isinstance(handler, type) else type(handler)
        request_type = get_command_request_type(handler_type)
        p = path if path.startswith("/") else f"/{path}"
        full_path = self.prefix.rstrip("/") + p
        self._routes.append(
            Route(full_path, self._make_endpoint(handler, request_type), methods=methods, name=f"{self.name}:{handler_type.__name__}")
        )
        return self

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def register_into(self, app: Any) -> None:
        """Append routes to a Starlette app (or its router)."""
        router = getattr(app, "router", app)
        router.routes.extend(self._routes)

    def _make_endpoint(self, handler: Any, request_type: type) -> Callable:
        async def endpoint(request: StarletteRequest) -> Response:
            req = Request.from_starlette(request)
            activator = RequestModelActivator(
                req,
                self.body_reader,
                [RouteValueParser(req.route_values), QueryStringValueParser(req.query_params)],
                self.config,
            )
            try:
                model = await activator.create_request_model(request_type)
            except (BodyParseError, ModelBindingError) as e:
                logger.warning("%s %s rejected: %s", req.method, request.url.path, e)
                return _error_response(e)
            h = self._handler_factory(handler) if isinstance(handler, type) else handler
            result = await self._call_handler(h, model)
            if not isinstance(result, HandlerResult):
                result = HandlerResult.ok(result)
            return to_response(result)
        return endpoint

    async def _call_handler(self, handler: Any, payload: Any) -> Any:
        result = handler.dispatch(payload)
        if inspect.isawaitable(result):
            return await result
        return result
