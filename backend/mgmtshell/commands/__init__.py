"""
Management commands and their dispatch.
"""

from .errors import CommandError, UnknownCommandError
from .registry import CommandRegistry, create_default_registry
from .start_vsd import START_VSD_COMMAND, start_vsd, start_vsd_handler

__all__ = [
    "CommandError",
    "CommandRegistry",
    "START_VSD_COMMAND",
    "UnknownCommandError",
    "create_default_registry",
    "start_vsd",
    "start_vsd_handler",
]
