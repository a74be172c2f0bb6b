"""
Result builders.

Content shapes:
- info:  {"message": [line, ...]}
- error: {"errorCode": int, "message": [line, ...]}
"""

from dataclasses import dataclass, field
from typing import List

from .models import CommandResult, ErrorCode, ResultStatus, ResultType


MESSAGE_KEY = "message"
ERROR_CODE_KEY = "errorCode"


@dataclass
class InfoResultData:
    """Accumulates info lines for a single result."""

    lines: List[str] = field(default_factory=list)
    header: str = ""
    footer: str = ""

    def add_line(self, line: str) -> "InfoResultData":
        self.lines.append(line)
        return self

    def build(self) -> CommandResult:
        content = {MESSAGE_KEY: list(self.lines)} if self.lines else {}
        return CommandResult(
            type=ResultType.INFO,
            status=ResultStatus.OK,
            header=self.header,
            content=content,
            footer=self.footer,
        )


def create_info_result(message: str) -> CommandResult:
    return InfoResultData().add_line(message).build()


def create_error_result(message: str, error_code: ErrorCode = ErrorCode.DEFAULT) -> CommandResult:
    return CommandResult(
        type=ResultType.ERROR,
        status=ResultStatus.ERROR,
        content={ERROR_CODE_KEY: error_code.value, MESSAGE_KEY: [message]},
    )


def create_shell_client_error_result(message: str) -> CommandResult:
    """Error attributable to the shell side: bad input or local environment."""
    return create_error_result(message, ErrorCode.SHELL_CLIENT)
