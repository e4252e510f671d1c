"""Define constants commonly used throughout the Action Scan entrypoint.

SPDX-License-Identifier: BSD-3-Clause
"""

# The scanner reads this path, relative to the working directory, when it is not told
# otherwise.
CANONICAL_CONFIG_PATH = "critical_dependencies.yaml"

DEFAULT_SCANNER = "gh-action-security-scanner"

STRATEGY_REFERENCE = "reference"
STRATEGY_COPY = "copy"
STRATEGIES = [STRATEGY_REFERENCE, STRATEGY_COPY]

FLAG_STRICT = "--strict"
FLAG_CONFIG = "--config"

# Exit codes owned by the entrypoint itself. Anything else is the scanner's.
ARGUMENT_ERROR_EXIT_CODE = 64
CONFIG_ERROR_EXIT_CODE = 66
PROCESS_ERROR_EXIT_CODE = 127

# Offset used when the scanner is terminated by a signal, as a POSIX shell does.
SIGNAL_EXIT_OFFSET = 128

LOG_FORMAT = "%(asctime)s - %(process)d - [%(levelname)s] %(message)s"
