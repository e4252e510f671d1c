"""Parses entrypoint arguments into an invocation request.

The surrounding Action runtime passes arguments positionally, as
`<target> [--strict] [--config <path>]`, and renders unset inputs as empty strings.
Empty arguments are dropped before parsing so that these invocations keep working,
while anything unrecognised is rejected rather than silently ignored.

SPDX-License-Identifier: BSD-3-Clause
"""

import argparse
from typing import List, Optional

from actionscan.entrypoint import constants
from actionscan.entrypoint.exceptions import ArgumentException
from actionscan.entrypoint.models import InvocationRequest


class ArgumentParser(argparse.ArgumentParser):
    """An argument parser which raises rather than exiting on malformed input."""

    def error(self, message: str):
        raise ArgumentException(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="actionscan-entrypoint",
        description=(
            "Action Scan entrypoint: Runs the action security scanner against a "
            "target, passing through strict mode and the scanner configuration."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "target",
        help="The target to scan, passed to the scanner unmodified",
    )
    parser.add_argument(
        constants.FLAG_STRICT,
        action="store_true",
        help="Ask the scanner to apply stricter pass / fail criteria",
    )
    parser.add_argument(
        constants.FLAG_CONFIG,
        metavar="PATH",
        help="Path to a scanner configuration file",
    )
    parser.add_argument(
        "--strategy",
        choices=constants.STRATEGIES,
        default=constants.STRATEGY_REFERENCE,
        help=(
            "How the configuration is delivered to the scanner: 'reference' passes "
            "the path as an argument, 'copy' copies the file to the canonical path"
        ),
    )
    parser.add_argument(
        "--scanner",
        default=constants.DEFAULT_SCANNER,
        metavar="BINARY",
        help="The scanner executable to run",
    )
    parser.add_argument(
        "--canonical-path",
        default=constants.CANONICAL_CONFIG_PATH,
        metavar="PATH",
        help=(
            "The configuration path passed to the scanner under the 'reference' "
            "strategy when --config is not given"
        ),
    )
    return parser


def normalise(argv: List[str]) -> List[str]:
    """Drop the empty arguments the Action runtime renders for unset inputs.

    An empty value following the config flag is dropped along with the flag, so that
    `<target> "" --config ""` means no config at all. A config flag with no value
    following it is left in place, and rejected by the parser.
    """
    candidates = []
    pointer = 0

    while pointer < len(argv):
        argument = argv[pointer]

        if (
            argument == constants.FLAG_CONFIG
            and pointer + 1 < len(argv)
            and not argv[pointer + 1].strip()
        ):
            pointer += 2
            continue

        if argument != "":
            candidates.append(argument)

        pointer += 1

    return candidates


def parse(argv: List[str]) -> argparse.Namespace:
    """Parse the argument vector, raising ArgumentException if it is malformed."""
    candidates = normalise(argv)

    if not candidates:
        raise ArgumentException("a scan target is required")

    arguments = build_parser().parse_args(candidates)

    # An empty path is treated the same as no path at all, as the Action runtime
    # renders an unset input as an empty string.
    if arguments.config is not None and not arguments.config.strip():
        arguments.config = None

    if not arguments.target.strip():
        raise ArgumentException("a scan target is required")

    # The scanner only reads the default path by itself.
    if (
        arguments.strategy == constants.STRATEGY_COPY
        and arguments.canonical_path != constants.CANONICAL_CONFIG_PATH
    ):
        raise ArgumentException(
            "--canonical-path cannot be changed when using the 'copy' strategy"
        )

    return arguments


def to_request(arguments: argparse.Namespace) -> InvocationRequest:
    """Convert parsed arguments into an InvocationRequest."""
    return InvocationRequest(
        target=arguments.target,
        strict=arguments.strict,
        config=arguments.config,
        strategy=arguments.strategy,
        scanner=arguments.scanner,
        canonical_path=arguments.canonical_path,
    )


def parse_request(argv: Optional[List[str]]) -> InvocationRequest:
    """Parse the argument vector straight into an InvocationRequest."""
    return to_request(parse(list(argv or [])))
