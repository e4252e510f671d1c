"""Resolves where the scanner reads its configuration from.

Two strategies are supported. 'reference' hands the caller's path, or the canonical
default, to the scanner as an argument. 'copy' copies the caller's file onto the
canonical path before the scanner starts, and leaves the scanner to find it there.

SPDX-License-Identifier: BSD-3-Clause
"""

import logging
import os
import shutil
from typing import Optional

import yaml
from actionscan.entrypoint import constants
from actionscan.entrypoint.exceptions import (
    ConfigResolutionException,
    ConfigUnavailableException,
)
from actionscan.entrypoint.models import (
    InvocationRequest,
    ResolvedConfig,
    ScannerConfig,
)


def by_reference(request: InvocationRequest) -> ResolvedConfig:
    """Pass the caller's configuration path through verbatim, or the default."""
    if request.config:
        path = request.config
    else:
        path = request.canonical_path

    return ResolvedConfig(path=path, strategy=constants.STRATEGY_REFERENCE)


def by_copy(request: InvocationRequest) -> ResolvedConfig:
    """Copy the caller's configuration onto the canonical path, if one was provided."""
    log = logging.getLogger(__name__)
    destination = request.canonical_path

    if not request.config:
        return ResolvedConfig(path=destination, strategy=constants.STRATEGY_COPY)

    source = request.config

    try:
        parent = os.path.dirname(destination)
        if parent:
            os.makedirs(parent, exist_ok=True)

        # Copying a file over itself would truncate it, and there is nothing to do.
        if os.path.exists(destination) and os.path.samefile(source, destination):
            log.info(f"Configuration {source} is already at {destination}")
        else:
            log.info(f"Copying configuration {source} to {destination}")
            shutil.copyfile(source, destination)
    except OSError as err:
        raise ConfigResolutionException(
            f"Unable to copy configuration {source} to {destination}: {err}"
        ) from err

    return ResolvedConfig(
        path=destination,
        strategy=constants.STRATEGY_COPY,
        copied_from=source,
    )


def resolve(request: InvocationRequest) -> ResolvedConfig:
    """Resolve the scanner configuration using the requested strategy."""
    if request.strategy == constants.STRATEGY_COPY:
        return by_copy(request)

    return by_reference(request)


def load(path: str) -> ScannerConfig:
    """Read and parse a scanner configuration file."""
    try:
        with open(os.path.abspath(os.path.expanduser(path)), "r") as fin:
            raw = yaml.safe_load(fin)
    except (OSError, yaml.YAMLError) as err:
        raise ConfigUnavailableException(err) from err

    # An empty document is an empty configuration.
    if raw is None:
        raw = {}

    if not isinstance(raw, dict):
        raise ConfigUnavailableException(
            f"Expected a mapping at the top level of {path}, found {type(raw).__name__}"
        )

    return ScannerConfig(raw)


def summarise(resolved: ResolvedConfig) -> Optional[ScannerConfig]:
    """Log a summary of the configuration the scanner will use, if it is readable.

    The scanner itself falls back to an empty configuration when its configuration
    cannot be loaded, so an unreadable file is only worth a warning here.
    """
    log = logging.getLogger(__name__)

    try:
        candidate = load(resolved.path)
        dependencies = candidate.critical_dependencies
        owners = candidate.trusted_owners
    except ConfigUnavailableException as err:
        log.warning(f"Configuration {resolved.path} could not be read: {err}")
        return None

    log.info(
        f"Configuration {resolved.path} declares {len(dependencies)} critical "
        f"dependencies and {len(owners)} trusted owners"
    )
    return candidate
