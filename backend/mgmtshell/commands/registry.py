"""
Command registry and transport-side execution.

The transport boundary runs a command by name and marshals its result into
CommandResponse JSON. When debugging is requested a response writer is
attached to the executing thread for exactly the span of the command.
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional

from ..config import ShellSettings
from ..response import create_command_response_json, response_writer_attached
from ..results import CommandResult
from .errors import UnknownCommandError
from .start_vsd import START_VSD_COMMAND, start_vsd_handler

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Mapping[str, object], ShellSettings], CommandResult]


class CommandRegistry:
    """Maps command names to handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def get(self, name: str) -> CommandHandler:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        return handler

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def execute_command(
        self,
        name: str,
        options: Optional[Mapping[str, object]],
        settings: ShellSettings,
        debug: bool = False,
    ) -> str:
        """
        Run a command and return its CommandResponse JSON.

        Raises:
            UnknownCommandError: If no handler is registered under `name`
        """
        handler = self.get(name)
        logger.info(f"[Commands] Executing '{name}' on {settings.member_name}")

        if not debug:
            result = handler(options or {}, settings)
            return create_command_response_json(settings.member_name, result)

        with response_writer_attached():
            result = handler(options or {}, settings)
            return create_command_response_json(settings.member_name, result)


def create_default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(START_VSD_COMMAND, start_vsd_handler)
    return registry
