# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/spec/resources.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict

from kubernetes.utils import parse_quantity

from tispec.errors import ResourceOrderError

CPU = "cpu"
MEMORY = "memory"
STORAGE = "storage"


@dataclass(frozen=True)
class ResourceRequirements:
    """
    Requests / limits keyed by resource name, values are Kubernetes
    quantity strings ("500m", "4Gi").
    """
    requests: Dict[str, str] = field(default_factory=dict)
    limits: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        for kind, limit in self.limits.items():
            request = self.requests.get(kind)
            if request is None:
                continue
            if parse_quantity(request) > parse_quantity(limit):
                raise ResourceOrderError(
                    f"{kind} request {request} exceeds limit {limit}"
                )


def copy_requirements(req: ResourceRequirements) -> ResourceRequirements:
    """Copy of *req* that shares no dicts with it."""
    return replace(req, requests=dict(req.requests), limits=dict(req.limits))


def with_storage(req: ResourceRequirements, size: str) -> ResourceRequirements:
    """Copy of *req* with a storage request of *size*."""
    out = copy_requirements(req)
    out.requests[STORAGE] = size
    return out


def requirements(
    *,
    cpu_request: str,
    memory_request: str,
    cpu_limit: str,
    memory_limit: str,
) -> ResourceRequirements:
    return ResourceRequirements(
        requests={CPU: cpu_request, MEMORY: memory_request},
        limits={CPU: cpu_limit, MEMORY: memory_limit},
    )


MEDIUM = requirements(
    cpu_request="1000m",
    memory_request="1Gi",
    cpu_limit="2000m",
    memory_limit="4Gi",
)

TIKV = requirements(
    cpu_request="500m",
    memory_request="4Gi",
    cpu_limit="1000m",
    memory_limit="16Gi",
)

TIDB = requirements(
    cpu_request="1000m",
    memory_request="1Gi",
    cpu_limit="1000m",
    memory_limit="16Gi",
)

TIFLASH = requirements(
    cpu_request="1000m",
    memory_request="2Gi",
    cpu_limit="4000m",
    memory_limit="16Gi",
)
