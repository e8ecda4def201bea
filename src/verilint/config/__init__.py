# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loading."""

from __future__ import annotations

from .loader import CONFIG_FILENAME, load_config
from .models import Config, ConfigError, OutputConfig, OutputMode, VerilatorSettings

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "OutputConfig",
    "OutputMode",
    "VerilatorSettings",
    "load_config",
]
