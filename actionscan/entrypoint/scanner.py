"""Provides the scanner collaborator, and the argument ordering it expects.

SPDX-License-Identifier: BSD-3-Clause
"""

import logging
import shutil
import subprocess  # nosec B404
from typing import List, NamedTuple

from actionscan.entrypoint import constants
from actionscan.entrypoint.exceptions import ProcessInvocationException
from actionscan.entrypoint.models import InvocationRequest, ResolvedConfig


class Execution(NamedTuple):
    """The outcome of a single scanner execution.

    The scanner inherits our streams and writes straight to the console, so only the
    exit code is kept.
    """

    exit_code: int


class Scanner:
    """An external scanner which can be executed with a list of arguments."""

    def execute(self, arguments: List[str]) -> Execution:
        raise NotImplementedError


class SubprocessScanner(Scanner):
    """Executes the scanner binary as a child process, inheriting our streams."""

    def __init__(self, binary: str = constants.DEFAULT_SCANNER):
        self.binary = binary

    def locate(self) -> str:
        """Returns the full path to the scanner binary."""
        candidate = shutil.which(self.binary)

        if candidate is None:
            raise ProcessInvocationException(
                f"Unable to find an executable scanner at {self.binary}"
            )

        return candidate

    def execute(self, arguments: List[str]) -> Execution:
        log = logging.getLogger(__name__)
        command = [self.locate()] + list(arguments)

        log.debug(f"Executing {command}")
        try:
            process = subprocess.run(command, check=False)  # nosec B603
        except OSError as err:
            raise ProcessInvocationException(
                f"Unable to execute scanner {self.binary}: {err}"
            ) from err

        return Execution(exit_code=process.returncode)


def build_arguments(request: InvocationRequest, resolved: ResolvedConfig) -> List[str]:
    """Returns the scanner arguments, in the order the configuration strategy needs.

    reference: <target> [--strict] --config <path>
    copy:      [--strict] <target>
    """
    if not resolved.explicit:
        arguments = []
        if request.strict:
            arguments.append(constants.FLAG_STRICT)

        arguments.append(request.target)
        return arguments

    arguments = [request.target]
    if request.strict:
        arguments.append(constants.FLAG_STRICT)

    arguments.extend([constants.FLAG_CONFIG, resolved.path])
    return arguments
