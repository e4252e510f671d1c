"""Action Scan entrypoint.

Adapts the arguments passed by the GitHub Action runtime into an invocation of the
action security scanner, and exits with whatever status the scanner exits with.

SPDX-License-Identifier: BSD-3-Clause
"""

import logging
import sys
from typing import List, Optional

from actionscan.entrypoint import config, constants, helpers, parser
from actionscan.entrypoint.__about__ import __version__
from actionscan.entrypoint.exceptions import (
    ArgumentException,
    ConfigResolutionException,
    ProcessInvocationException,
)
from actionscan.entrypoint.scanner import Scanner, SubprocessScanner, build_arguments
from colorama import Fore, init


def main(argv: Optional[List[str]] = None, scanner: Optional[Scanner] = None) -> int:
    """Run the scanner for a single invocation, returning the exit status."""
    log = logging.getLogger(__name__)

    if argv is None:
        argv = sys.argv[1:]

    try:
        request = parser.parse_request(argv)
    except ArgumentException as err:
        log.fatal(f"Invalid arguments: {err}")
        helpers.printe(f"❌ Invalid arguments: {err}", prefix=Fore.RED)
        helpers.printe(parser.build_parser().format_usage().rstrip())
        return constants.ARGUMENT_ERROR_EXIT_CODE

    helpers.printe(helpers.banner(version=__version__))

    # The configuration must be in place before the scanner starts, and there is no
    # fallback to the defaults if it cannot be.
    try:
        resolved = config.resolve(request)
    except ConfigResolutionException as err:
        log.fatal(err)
        helpers.printe(f"❌ {err}", prefix=Fore.RED)
        return constants.CONFIG_ERROR_EXIT_CODE

    config.summarise(resolved)

    if scanner is None:
        scanner = SubprocessScanner(binary=request.scanner)

    arguments = build_arguments(request, resolved)
    log.info(f"Running {helpers.render_command(request.scanner, arguments)}")

    try:
        execution = scanner.execute(arguments)
    except ProcessInvocationException as err:
        log.fatal(err)
        helpers.printe(f"❌ {err}", prefix=Fore.RED)
        return constants.PROCESS_ERROR_EXIT_CODE

    status = helpers.exit_status(execution.exit_code)
    if status == 0:
        log.info("Scanner completed successfully")
    else:
        log.info(f"Scanner exited with status {status}")

    return status


def run():
    """Console script entrypoint."""
    # Colorama.
    init()

    logging.basicConfig(level=logging.INFO, format=constants.LOG_FORMAT)

    sys.exit(main())
