"""Helpers used throughout the Action Scan entrypoint.

SPDX-License-Identifier: BSD-3-Clause
"""

import shlex
import sys
from typing import List

import colorama
from actionscan.entrypoint.constants import SIGNAL_EXIT_OFFSET


def render_command(binary: str, arguments: List[str]) -> str:
    """Returns the command line as it could be pasted into a shell."""
    return " ".join(shlex.quote(part) for part in [binary] + list(arguments))


def exit_status(returncode: int) -> int:
    """Convert a child process return code into the status we should exit with."""
    # Negative return codes indicate the child was terminated by a signal.
    if returncode < 0:
        return SIGNAL_EXIT_OFFSET + abs(returncode)

    return returncode


def printe(string: str, prefix: str = ""):
    """Print a message to stderr, keeping stdout for the scanner."""
    print(f"{prefix}{string}{colorama.Style.RESET_ALL}", file=sys.stderr)


def banner(version: str) -> str:
    """Returns an Action Scan console banner."""
    banner = colorama.Fore.BLUE
    banner += rf"""
    ___        __  _
   /   | _____/ /_(_)___  ____  ______________ _____
  / /| |/ ___/ __/ / __ \/ __ \/ ___/ ___/ __ `/ __ \
 / ___ / /__/ /_/ / /_/ / / / (__  ) /__/ /_/ / / / /
/_/  |_\___/\__/_/\____/_/ /_/____/\___/\__,_/_/ /_/

    Action Scan Entrypoint Version {version}
    """
    return banner
