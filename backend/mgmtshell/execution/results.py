"""
External process outcome model.

Structured representation of a single tool launch.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExternalProcessOutcome(BaseModel):
    """
    Result of launching an external tool.

    A launched process is a success regardless of its exit code. Only
    spawn-time failures set `launch_error`.
    """

    model_config = ConfigDict(extra="forbid")

    command_line: List[str]
    """Argument vector: tool path followed by archive files in set order."""

    stderr: str = ""
    """Standard error captured until EOF."""

    exit_code: Optional[int] = None
    """Process exit code (None if the process never started)."""

    pid: Optional[int] = None

    launch_error: Optional[str] = None
    """Human-readable spawn failure, if any."""

    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def succeeded(self) -> bool:
        return self.launch_error is None

    def duration_seconds(self) -> Optional[float]:
        """Wall-clock time from launch to exit."""
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()

    def summary(self) -> str:
        if not self.succeeded:
            return f"LAUNCH FAILED: {self.command_line[0]} - {self.launch_error}"
        return f"EXITED {self.exit_code}: {' '.join(self.command_line)}"
