# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/tispec/errors.py
class TispecError(RuntimeError):
    """Base class for tispec failures."""

class ConfigFileError(TispecError):
    """Raised when a cluster config file cannot be read."""

class ResourceOrderError(TispecError, ValueError):
    """Raised when a resource request exceeds its limit."""
