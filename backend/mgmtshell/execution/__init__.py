"""
External tool launching.
"""

from .errors import EnvironmentNotConfiguredError, ToolLaunchError, ToolNotFoundError
from .launcher import ToolLauncher, get_path_to_vsd
from .process_streams import wait_and_capture_stderr
from .results import ExternalProcessOutcome

__all__ = [
    "EnvironmentNotConfiguredError",
    "ExternalProcessOutcome",
    "ToolLaunchError",
    "ToolLauncher",
    "ToolNotFoundError",
    "get_path_to_vsd",
    "wait_and_capture_stderr",
]
