#!/usr/bin/env python3
"""Prize wheel configuration.

`Settings` holds runtime knobs (defaults plus environment overrides);
`WheelConfig` is the immutable option/color description a wheel is built from.
"""

from __future__ import annotations

from .defaults import DEFAULTS
from .paths import asset_dirs, repo_root
from .settings import Settings
from .wheel import DEFAULT_OPTIONS, WheelConfig


__all__ = [
    "DEFAULTS",
    "DEFAULT_OPTIONS",
    "Settings",
    "WheelConfig",
    "asset_dirs",
    "repo_root",
]
