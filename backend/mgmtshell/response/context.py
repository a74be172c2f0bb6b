"""
Command execution context.

Per-thread attachment of a CommandResponseWriter. The transport layer
attaches a writer around a command's execution; commands may append trace
text to it; the envelope builder reads what was written into `debugInfo`.

Each thread sees only its own writer. The builder never attaches or detaches.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional


class CommandResponseWriter:
    """Accumulates trace text produced while a command runs."""

    def __init__(self) -> None:
        self._chunks: List[str] = []

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def write_line(self, line: str) -> None:
        self._chunks.append(line + "\n")

    def get_response_written(self) -> str:
        return "".join(self._chunks)


class CommandExecutionContext:
    """Thread-local holder for the active response writer."""

    _local = threading.local()

    @classmethod
    def attach_response_writer(cls, writer: CommandResponseWriter) -> None:
        cls._local.writer = writer

    @classmethod
    def detach_response_writer(cls) -> None:
        cls._local.writer = None

    @classmethod
    def is_response_writer_attached(cls) -> bool:
        return getattr(cls._local, "writer", None) is not None

    @classmethod
    def get_response_writer(cls) -> Optional[CommandResponseWriter]:
        return getattr(cls._local, "writer", None)


@contextmanager
def response_writer_attached(
    writer: Optional[CommandResponseWriter] = None,
) -> Iterator[CommandResponseWriter]:
    """
    Attach a writer to the current thread for the span of the block.

    On exit the writer that was attached before (if any) is restored.
    """
    writer = writer or CommandResponseWriter()
    previous = CommandExecutionContext.get_response_writer()
    CommandExecutionContext.attach_response_writer(writer)
    try:
        yield writer
    finally:
        if previous is None:
            CommandExecutionContext.detach_response_writer()
        else:
            CommandExecutionContext.attach_response_writer(previous)
