from commandrouting.handlers.commands import CommandHandler, HandlerResult
from commandrouting.handlers.inspection import get_command_request_type, get_command_response_type

__all__ = [
    "CommandHandler",
    "HandlerResult",
    "get_command_request_type",
    "get_command_response_type",
]
