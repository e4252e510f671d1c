"""Action Scan entrypoint metadata.

SPDX-License-Identifier: BSD-3-Clause
"""

__title__ = "actionscan-entrypoint"
__summary__ = "GitHub Action entrypoint for the action security scanner."
__version__ = "0.1.0"
__license__ = "BSD-3-Clause"
