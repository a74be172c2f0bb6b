"""
CommandResponse builder.

Two directions:
- Serialize: CommandResult + member name -> CommandResponse -> JSON text
- Deserialize: JSON text -> CommandResponse

Deserialization never raises for bad input. Malformed or non-conforming
text becomes an error-shaped envelope whose content holds the formatted
traceback, so the shell always receives a well-formed response.
"""

import json
import logging
import traceback
from datetime import datetime
from typing import Optional, Union

from pydantic import ValidationError

from .. import __version__
from ..results.models import CommandResult, ResultStatus, ResultType
from .context import CommandExecutionContext, CommandResponseWriter
from .envelope import (
    ERROR_IDENTIFIER,
    NULL_TOKEN,
    SINGLE_PAGE,
    CommandResponse,
    CommandResponseData,
)

logger = logging.getLogger(__name__)


def prepare_command_response(
    member_name: str,
    result: CommandResult,
    writer: Optional[CommandResponseWriter] = None,
) -> CommandResponse:
    """
    Wrap a command result in an envelope.

    Args:
        member_name: Identifier of the executing member
        result: The command's result
        writer: Explicit trace source. When omitted, the writer attached to
            the current thread (if any) is used.
    """
    return CommandResponse(
        sender=member_name,
        version=__version__,
        content_type=result.type.value,
        status=result.status_code,
        page=SINGLE_PAGE,
        when=datetime.now().isoformat(),
        token_accessor=NULL_TOKEN,
        debug_info=get_debug_info(writer),
        data=CommandResponseData(
            header=result.header,
            content=result.content,
            footer=result.footer,
        ),
        failed_to_persist=result.failed_to_persist,
        file_to_download=result.file_to_download,
    )


def get_command_response_json(response: CommandResponse) -> str:
    return response.model_dump_json(by_alias=True)


def create_command_response_json(
    member_name: str,
    result: CommandResult,
    writer: Optional[CommandResponseWriter] = None,
) -> str:
    return get_command_response_json(prepare_command_response(member_name, result, writer))


def prepare_command_response_from_json(json_string: Union[str, bytes]) -> CommandResponse:
    """
    Parse envelope JSON.

    Returns an error-shaped envelope instead of raising when the text is
    not valid JSON (including input nested too deeply to decode) or does not
    describe a CommandResponse.
    """
    try:
        return CommandResponse.model_validate(json.loads(json_string))
    except (
        json.JSONDecodeError,
        UnicodeDecodeError,
        RecursionError,
        TypeError,
        ValidationError,
    ) as e:
        logger.warning(f"[Response] Malformed command response: {e}")
        return error_response(_stack_trace_as_string(e))


def error_response(diagnostic: str, member_name: str = "") -> CommandResponse:
    """Error-shaped envelope carrying `diagnostic` as its content."""
    return CommandResponse(
        sender=member_name,
        version=__version__,
        content_type=ResultType.ERROR.value,
        status=ResultStatus.ERROR.value,
        when=datetime.now().isoformat(),
        data=CommandResponseData(content={ERROR_IDENTIFIER: diagnostic}),
    )


def get_debug_info(writer: Optional[CommandResponseWriter] = None) -> str:
    if writer is not None:
        return writer.get_response_written()
    if CommandExecutionContext.is_response_writer_attached():
        return CommandExecutionContext.get_response_writer().get_response_written()
    return ""


def _stack_trace_as_string(error: BaseException) -> str:
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))
