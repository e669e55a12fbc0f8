# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/spec/images.py

from __future__ import annotations

from tispec.config.settings import RecommenderSettings


def build_image(
    name: str,
    base_version: str,
    image: str,
    *,
    settings: RecommenderSettings,
) -> str:
    """
    Resolve the image reference for a component.

    An explicit *image* always wins. Otherwise the reference is
    ``[hub/]repository/name:base_version``; the hub segment is left out
    entirely when no hub address is configured.
    """
    if image:
        return image

    prefix = f"{settings.hub_address}/" if settings.hub_address else ""
    return f"{prefix}{settings.docker_repository}/{name}:{base_version}"
