"""Action Scan entrypoint exceptions.

SPDX-License-Identifier: BSD-3-Clause
"""


class EntrypointException(Exception):
    """The most generic form of exception raised by the entrypoint."""


class ArgumentException(EntrypointException):
    """Indicates that the invocation arguments are missing or malformed."""


class ConfigResolutionException(EntrypointException):
    """Indicates that the scanner configuration could not be put in place."""


class ProcessInvocationException(EntrypointException):
    """Indicates that the scanner executable could not be started."""


class ConfigUnavailableException(EntrypointException):
    """Indicates that a scanner configuration file could not be read or parsed."""
