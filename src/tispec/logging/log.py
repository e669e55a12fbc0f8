# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

#src/tispec/logging/log.py

from __future__ import annotations

import logging
from pathlib import Path
import uuid

FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_handler(verbose: bool) -> logging.Handler:
    # stderr, so manifests printed on stdout stay parseable
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


def _trace_handler(log_dir: Path, run_id: str) -> tuple[logging.Handler, Path]:
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / f"tispec-{run_id}.log"
    handler = logging.FileHandler(path)
    handler.setLevel(logging.DEBUG)
    return handler, path


def init_logging(
    *,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> tuple[logging.Logger, str, Path | None]:
    """
    Configure the "tispec" logger for one CLI invocation.

    Console output is quiet unless *verbose*. A debug trace file is only
    written when *log_dir* is given. Returns (logger, run_id, trace path).
    """
    run_id = str(uuid.uuid4())

    logger = logging.getLogger("tispec")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    handlers = [_console_handler(verbose)]
    trace_path = None
    if log_dir is not None:
        trace, trace_path = _trace_handler(log_dir, run_id)
        handlers.append(trace)

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("run_id=%s trace=%s", run_id, trace_path)
    return logger, run_id, trace_path
