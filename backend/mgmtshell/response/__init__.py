"""
Command response envelopes and their JSON protocol.
"""

from .builder import (
    create_command_response_json,
    error_response,
    get_command_response_json,
    get_debug_info,
    prepare_command_response,
    prepare_command_response_from_json,
)
from .context import (
    CommandExecutionContext,
    CommandResponseWriter,
    response_writer_attached,
)
from .envelope import (
    ERROR_IDENTIFIER,
    NULL_TOKEN,
    SINGLE_PAGE,
    CommandResponse,
    CommandResponseData,
)

__all__ = [
    "CommandExecutionContext",
    "CommandResponse",
    "CommandResponseData",
    "CommandResponseWriter",
    "ERROR_IDENTIFIER",
    "NULL_TOKEN",
    "SINGLE_PAGE",
    "create_command_response_json",
    "error_response",
    "get_command_response_json",
    "get_debug_info",
    "prepare_command_response",
    "prepare_command_response_from_json",
    "response_writer_attached",
]
