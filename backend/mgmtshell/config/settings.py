"""
Shell settings.

Read once from the environment and passed explicitly to commands.
"""

import os
import socket
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_GEODE_HOME = "GEODE_HOME"
ENV_MEMBER_NAME = "MGMTSHELL_MEMBER_NAME"
ENV_DEBUG = "MGMTSHELL_DEBUG"


@dataclass(frozen=True)
class ShellSettings:
    """
    Immutable shell configuration.

    geode_home: Installation root; None or blank means not configured
    member_name: Identifier stamped on response envelopes as the sender
    debug: Echo tool command lines and write them to the response writer
    """

    geode_home: Optional[str] = None
    member_name: str = ""
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellSettings":
        env = os.environ if environ is None else environ
        return cls(
            geode_home=env.get(ENV_GEODE_HOME),
            member_name=env.get(ENV_MEMBER_NAME) or socket.gethostname(),
            debug=env.get(ENV_DEBUG, "false").lower() == "true",
        )
