# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import List, Dict, Any
from datetime import datetime, timezone
import uuid


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events of one recommendation
    namespace: str
    name: str

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(namespace: str, name: str) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "run_id": str(uuid.uuid4()),
        "namespace": namespace,
        "name": name,
    }


# ---------------------------------------------------------------------
# Recommender
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class RecommendationComputed(BaseEvent):
    roles: List[str]
    config_maps: List[str]
