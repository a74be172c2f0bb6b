"""
Command result model and builders.
"""

from .builder import (
    ERROR_CODE_KEY,
    MESSAGE_KEY,
    InfoResultData,
    create_error_result,
    create_info_result,
    create_shell_client_error_result,
)
from .models import CommandResult, ErrorCode, ResultStatus, ResultType

__all__ = [
    "CommandResult",
    "ERROR_CODE_KEY",
    "ErrorCode",
    "InfoResultData",
    "MESSAGE_KEY",
    "ResultStatus",
    "ResultType",
    "create_error_result",
    "create_info_result",
    "create_shell_client_error_result",
]
