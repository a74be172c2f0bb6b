"""
Tool launch errors.

All errors are non-fatal to the shell. They indicate the external tool could
not be started; the command reports them as user-facing error results.
"""


class ToolLaunchError(Exception):
    """
    Base exception for external tool launch failures.

    Raised before or while spawning the tool process, never for a tool that
    started and then exited non-zero.
    """

    pass


class EnvironmentNotConfiguredError(ToolLaunchError):
    """
    Installation root is not configured.

    Raised when GEODE_HOME is unset or blank, so the tool path cannot be
    derived.
    """

    pass


class ToolNotFoundError(ToolLaunchError):
    """
    Tool executable does not exist at the resolved path.

    Raised before any process launch is attempted.
    """

    def __init__(self, message: str, tool_path: str):
        self.tool_path = tool_path
        super().__init__(message)
