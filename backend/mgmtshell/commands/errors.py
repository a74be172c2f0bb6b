"""
Command dispatch errors.
"""


class CommandError(Exception):
    """Base exception for command dispatch failures."""

    pass


class UnknownCommandError(CommandError):
    """No handler is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name}")
