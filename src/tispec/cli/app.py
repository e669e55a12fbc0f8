# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/cli/app.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tispec.config.loader import load_config
from tispec.config.models import ClusterConfig
from tispec.config.settings import load_settings
from tispec.logging.log import init_logging
from tispec.observers.dispatcher import EventBus
from tispec.observers.logger import LoggerObserver
from tispec.spec.chaos import SCENARIOS
from tispec.spec.recommend import recommend_cluster
from tispec.utils.serialize import dump_manifests


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(help="TiDB cluster spec recommender")


@app.command()
def recommend(
    namespace: str = typer.Option(..., "--namespace", "-n"),
    name: str = typer.Option(..., "--name"),
    config: Optional[Path] = typer.Option(None, "--config", help="Cluster config YAML"),
    image_version: Optional[str] = typer.Option(None, "--image-version"),
    tikv_replicas: Optional[int] = typer.Option(None, "--tikv-replicas"),
    tiflash_replicas: Optional[int] = typer.Option(None, "--tiflash-replicas"),
    nemesis: Optional[str] = typer.Option(
        None,
        "--nemesis",
        help="Comma separated fault injection scenarios (e.g. delay_tikv,errno_pd)",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    debug: bool = typer.Option(False, "--debug"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Write a debug trace file here"),
) -> None:
    """
    Print recommended TidbCluster / TidbMonitor / Service / ConfigMap manifests.
    """
    init_logging(verbose=debug, log_dir=log_dir)

    cfg = load_config(config) if config else ClusterConfig()

    # flags override the file
    overrides = {
        k: v
        for k, v in {
            "image_version": image_version,
            "tikv_replicas": tikv_replicas,
            "tiflash_replicas": tiflash_replicas,
            "nemesis": nemesis,
        }.items()
        if v is not None
    }
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    bus = EventBus([LoggerObserver()]) if debug else None
    r = recommend_cluster(namespace, name, cfg, settings=load_settings(), bus=bus)
    text = dump_manifests(r)

    if output:
        output.write_text(text)
        typer.echo(f"Wrote {output}")
    else:
        typer.echo(text, nl=False)


@app.command()
def scenarios() -> None:
    """
    List the nemesis tokens understood by `recommend`.
    """
    for scenario in SCENARIOS:
        typer.echo(f"{scenario.role}: {', '.join(sorted(scenario.tokens))}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
