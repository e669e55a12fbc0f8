# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/config/settings.py

from __future__ import annotations
from dataclasses import dataclass
import os


@dataclass(frozen=True)
class RecommenderSettings:
    hub_address: str = ""
    docker_repository: str = "pingcap"
    local_volume_storage_class: str = "local-storage"
    tidb_monitor_svc_type: str = "ClusterIP"


def load_settings() -> RecommenderSettings:
    # sensible defaults for dev; override via env
    return RecommenderSettings(
        hub_address=os.getenv("TISPEC_HUB_ADDRESS", ""),
        docker_repository=os.getenv("TISPEC_DOCKER_REPOSITORY", "pingcap"),
        local_volume_storage_class=os.getenv(
            "TISPEC_LOCAL_VOLUME_STORAGE_CLASS", "local-storage"
        ),
        tidb_monitor_svc_type=os.getenv("TISPEC_MONITOR_SVC_TYPE", "ClusterIP"),
    )
