# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/observers/dispatcher.py
from __future__ import annotations
import logging
from typing import List, Optional, Protocol
from .events import BaseEvent

log = logging.getLogger("tispec")


class RecommendationObserver(Protocol):
    """Anything that wants to hear about finished recommendations."""
    def notify(self, event: BaseEvent) -> None: ...


class EventBus:
    def __init__(self, observers: Optional[List[RecommendationObserver]] = None):
        self._observers = list(observers or [])

    def subscribe(self, observer: RecommendationObserver) -> None:
        self._observers.append(observer)

    def emit(self, event: BaseEvent) -> None:
        for ob in self._observers:
            try:
                ob.notify(event)
            except Exception:
                # a failing observer must not fail the recommendation
                log.debug("observer %r failed on %s", ob, type(event).__name__, exc_info=True)
