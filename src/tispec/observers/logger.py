# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/observers/logger.py
from __future__ import annotations
import logging
from .events import BaseEvent


class LoggerObserver:
    """Forwards events to the tispec logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger("tispec")

    def notify(self, event: BaseEvent) -> None:
        self.log.info("%s %s", type(event).__name__, event.dict())
