"""
Command result models.

A CommandResult is what a command handler returns. The transport layer
wraps it in a CommandResponse envelope; the shell reads it back out.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResultType(str, Enum):
    """
    Result type tag carried as the envelope's content type.

    INFO: Informational lines
    ERROR: Error message and error code
    """

    INFO = "info"
    ERROR = "error"


class ResultStatus(int, Enum):
    """Status code carried by results and envelopes."""

    OK = 0
    ERROR = -1


class ErrorCode(int, Enum):
    """Error codes placed in error-shaped content."""

    DEFAULT = 400
    SHELL_CLIENT = 410
    PARSING = 415
    UNKNOWN = 500


class CommandResult(BaseModel):
    """
    Outcome of a single command invocation.

    `content` is the structured payload. It is always present: an empty
    mapping when the command produced no data.
    """

    model_config = ConfigDict(extra="forbid")

    type: ResultType
    status: ResultStatus = ResultStatus.OK
    header: str = ""
    content: Dict[str, Any] = Field(default_factory=dict)
    footer: str = ""
    failed_to_persist: bool = False
    file_to_download: Optional[str] = None

    @property
    def status_code(self) -> int:
        return self.status.value

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    def message_lines(self) -> list[str]:
        """Message lines from info or error content (empty if none)."""
        return [str(line) for line in self.content.get("message", [])]
