"""Models used by the Action Scan entrypoint.

SPDX-License-Identifier: BSD-3-Clause
"""

from typing import Any, Dict, List, NamedTuple, Optional

import jmespath
from actionscan.entrypoint.constants import (
    CANONICAL_CONFIG_PATH,
    DEFAULT_SCANNER,
    STRATEGY_REFERENCE,
)
from actionscan.entrypoint.exceptions import ConfigUnavailableException


class InvocationRequest(NamedTuple):
    """A single request to run the scanner, as supplied by the caller."""

    target: str
    strict: bool = False
    config: Optional[str] = None
    strategy: str = STRATEGY_REFERENCE
    scanner: str = DEFAULT_SCANNER
    canonical_path: str = CANONICAL_CONFIG_PATH


class ResolvedConfig(NamedTuple):
    """Where the scanner will read its configuration from."""

    path: str
    strategy: str
    copied_from: Optional[str] = None

    @property
    def explicit(self) -> bool:
        """Indicates whether the path must be passed to the scanner as an argument."""
        return self.strategy == STRATEGY_REFERENCE


class ConfigObject:
    def __init__(self, raw: Dict[str, Any]):
        self._raw = raw

    def by_path(self, path: str, default: Any = None) -> Any:
        """Returns a given field by JMESPath, or the default if not found."""
        candidate = jmespath.search(path, self._raw)

        if candidate is None:
            return default
        else:
            return candidate


class ScannerConfig(ConfigObject):
    def by_list(self, path: str) -> List[str]:
        """Returns a list field by JMESPath, raising if it is present but not a list."""
        candidates = self.by_path(path, [])

        if not isinstance(candidates, list):
            raise ConfigUnavailableException(
                f"Expected a list for {path}, found {type(candidates).__name__}"
            )

        return [str(candidate) for candidate in candidates]

    @property
    def critical_dependencies(self) -> List[str]:
        """Returns actions which must always be pinned, regardless of strict mode."""
        return self.by_list("critical_dependencies")

    @property
    def trusted_owners(self) -> List[str]:
        """Returns owners whose actions do not require version pinning."""
        return sorted(set(self.by_list("trusted_owners")))
