"""
Command execution endpoint.

HTTP transport boundary: executes a registered command on this member and
returns the CommandResponse envelope JSON as the response body.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict, Field

from ..commands import UnknownCommandError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/management", tags=["management"])


class CommandRequest(BaseModel):
    """Request body for command execution."""

    model_config = ConfigDict(extra="forbid")

    command: str
    options: Dict[str, Any] = Field(default_factory=dict)
    debug: bool = False


@router.post("/commands")
def execute_command(body: CommandRequest, request: Request) -> Response:
    """
    Execute a command and return its envelope.

    Sync endpoint: runs in a worker thread, so the debug writer attached
    by the registry is local to this request.
    """
    registry = request.app.state.command_registry
    settings = request.app.state.settings

    try:
        envelope_json = registry.execute_command(
            body.command, body.options, settings, debug=body.debug
        )
    except UnknownCommandError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(content=envelope_json, media_type="application/json")


@router.get("/ping")
def ping() -> Dict[str, str]:
    return {"status": "ok"}
