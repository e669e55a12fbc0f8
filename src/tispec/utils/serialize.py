# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/utils/serialize.py

from __future__ import annotations

from dataclasses import is_dataclass, fields
from typing import Any, Dict, List, TYPE_CHECKING

import yaml

from tispec.spec.models import (
    GrafanaSpec,
    PDConfig,
    PrometheusSpec,
    RoleSpec,
)

if TYPE_CHECKING:
    from tispec.spec.recommend import Recommendation

_RENAMES = {
    "enable_pv_reclaim": "enablePVReclaim",
}

# (type, field) pairs whose dict value is merged into the parent,
# matching how the operator CRDs embed these structs.
_INLINE = {
    (RoleSpec, "resources"),
    (PrometheusSpec, "container"),
}


def _camel(name: str) -> str:
    if name in _RENAMES:
        return _RENAMES[name]
    head, *rest = name.split("_")
    return head + "".join(p.title() for p in rest)


def _empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)


def to_jsonable(obj: Any) -> Any:
    """
    Convert model dataclasses into plain dicts with camelCase keys.
    None values and empty containers are dropped.
    """
    if isinstance(obj, PDConfig):
        if obj.enable_placement_rules is None:
            return None
        return {"replication": {"enable-placement-rules": obj.enable_placement_rules}}

    if isinstance(obj, GrafanaSpec):
        out = to_jsonable(obj.container)
        out["service"] = {"type": obj.service_type}
        return out

    if is_dataclass(obj):
        out: Dict[str, Any] = {}
        for f in fields(obj):
            value = to_jsonable(getattr(obj, f.name))
            if _empty(value):
                continue
            if (type(obj), f.name) in _INLINE:
                out.update(value)
            else:
                out[_camel(f.name)] = value
        return out

    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}

    if isinstance(obj, list):
        return [to_jsonable(v) for v in obj]

    return obj


def _resource(api_version: str, kind: str, obj: Any) -> Dict[str, Any]:
    doc: Dict[str, Any] = {"apiVersion": api_version, "kind": kind}
    doc.update(to_jsonable(obj))
    return doc


def to_manifests(r: "Recommendation") -> List[Dict[str, Any]]:
    """One manifest dict per object, cluster first."""
    docs = [
        _resource("pingcap.com/v1alpha1", "TidbCluster", r.tidb_cluster),
        _resource("pingcap.com/v1alpha1", "TidbMonitor", r.tidb_monitor),
        _resource("v1", "Service", r.service),
    ]
    docs.extend(_resource("v1", "ConfigMap", cm) for cm in r.injection_config_maps)
    return docs


def dump_manifests(r: "Recommendation") -> str:
    return yaml.safe_dump_all(to_manifests(r), sort_keys=False)
