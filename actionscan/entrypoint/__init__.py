"""Action Scan GitHub Action entrypoint.

SPDX-License-Identifier: BSD-3-Clause
"""

from actionscan.entrypoint import __about__  # noqa:F401
from actionscan.entrypoint import cli  # noqa:F401
from actionscan.entrypoint import config  # noqa:F401
from actionscan.entrypoint import constants  # noqa:F401
from actionscan.entrypoint import exceptions  # noqa:F401
from actionscan.entrypoint import helpers  # noqa:F401
from actionscan.entrypoint import models  # noqa:F401
from actionscan.entrypoint import parser  # noqa:F401
from actionscan.entrypoint import scanner  # noqa:F401
