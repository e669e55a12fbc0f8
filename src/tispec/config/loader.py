# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from .models import ClusterConfig
from ..errors import ConfigFileError

log = logging.getLogger("tispec")


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    raw = path.read_text()
    expanded = os.path.expandvars(raw)
    return yaml.safe_load(expanded) or {}


def load_config(path: str | Path) -> ClusterConfig:
    """
    Load and validate a cluster config YAML.

    The file mirrors ``ClusterConfig`` field for field::

        image_version: v4.0.0
        tikv_replicas: 3
        tiflash_replicas: 1
        nemesis: delay_tikv,errno_pd

    ``${ENV_VAR}`` placeholders are resolved with ``os.path.expandvars``
    before validation, so image tags can come from CI variables.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigFileError(f"Cluster config not found: {path}")

    data = _load_yaml(path)
    log.debug("Loaded cluster config from %s", path)
    return ClusterConfig.model_validate(data)
