# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/__init__.py

from tispec.config.models import ClusterConfig
from tispec.config.settings import RecommenderSettings, load_settings
from tispec.spec.recommend import Recommendation, recommend_cluster

__all__ = [
    "ClusterConfig",
    "RecommenderSettings",
    "load_settings",
    "Recommendation",
    "recommend_cluster",
]

__version__ = "0.1.0"
