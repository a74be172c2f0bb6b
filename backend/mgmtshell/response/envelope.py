"""
CommandResponse envelope.

Serializable structure carrying a command's outcome from the executing
member to the shell. JSON keys are camelCase; the Python attributes are
snake_case aliases of them.

INVARIANT: data.content is always present. Envelopes are immutable.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Responses are never paged.
SINGLE_PAGE = "1/1"

# Reserved token accessor slot; always this sentinel.
NULL_TOKEN = "__NULL__"

# Key of the diagnostic entry in error-shaped content.
ERROR_IDENTIFIER = "__error__"


class CommandResponseData(BaseModel):
    """Header, structured content and footer of a response."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    header: str = ""
    content: Dict[str, Any] = Field(default_factory=dict)
    footer: str = ""


class CommandResponse(BaseModel):
    """
    Envelope for one command invocation's result.

    Built once per invocation, consumed once by a serializer or the caller.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    sender: str
    """Member that executed the command."""

    version: str
    """Producer version."""

    content_type: str = Field(alias="contentType")
    """Result type tag (info, error, ...)."""

    status: int
    page: str = SINGLE_PAGE
    when: str
    """Creation timestamp (ISO format)."""

    token_accessor: str = Field(default=NULL_TOKEN, alias="tokenAccessor")
    debug_info: str = Field(default="", alias="debugInfo")
    data: CommandResponseData = Field(default_factory=CommandResponseData)
    failed_to_persist: bool = Field(default=False, alias="failedToPersist")
    file_to_download: Optional[str] = Field(default=None, alias="fileToDownload")

    @property
    def header(self) -> str:
        return self.data.header

    @property
    def content(self) -> Dict[str, Any]:
        return self.data.content

    @property
    def footer(self) -> str:
        return self.data.footer

    @property
    def is_error_envelope(self) -> bool:
        """True for envelopes synthesized from unparseable text."""
        return ERROR_IDENTIFIER in self.data.content
