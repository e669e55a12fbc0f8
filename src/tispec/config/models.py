# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/config/models.py

from typing import Optional
from pydantic import BaseModel


class ClusterConfig(BaseModel):
    """
    Compact knobs for a recommended TiDB cluster.

    Replica counts are taken as given; negative values are not rejected.
    """

    # Image version shared by pd / tikv / tidb unless overridden below
    image_version: str = ""

    tikv_replicas: int = 3
    pd_image: str = ""
    tikv_image: str = ""
    tidb_image: str = ""

    # TiFlash is only added when tiflash_replicas > 0
    tiflash_replicas: int = 0
    tiflash_image: str = ""

    # Comma-separated fault injection scenarios, e.g. "delay_tikv,errno_pd"
    nemesis: str = ""

    # Optional binlog pump
    pump_replicas: Optional[int] = None

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }
