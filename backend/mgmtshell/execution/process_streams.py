"""
Process stream capture.

The launcher waits on standard error only. Standard output is not part of
the captured result and is discarded at spawn time.
"""

import subprocess


def wait_and_capture_stderr(process: subprocess.Popen) -> str:
    """
    Read the process's standard error until EOF, then wait for exit.

    Blocks with no timeout. Returns the captured text, possibly empty.
    The process is always reaped, even if reading fails. Undecodable bytes
    are expected to be replaced by the pipe's `errors` setting.
    """
    if process.stderr is None:
        process.wait()
        return ""

    try:
        with process.stderr:
            captured = process.stderr.read()
    finally:
        process.wait()
    return captured or ""
