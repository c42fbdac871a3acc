#!/usr/bin/env python3
"""Runtime settings: defaults merged with environment overrides.

Nothing here is written back to disk; every run starts from `DEFAULTS`.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping

from ._props import float_prop, int_prop
from .defaults import DEFAULTS as _DEFAULTS

logger = logging.getLogger(__name__)

# env var -> (settings key, parser)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "PRIZEWHEEL_RENDER_WORKERS": ("render_workers", int),
    "PRIZEWHEEL_FRAME_SIZE": ("frame_size", int),
    "PRIZEWHEEL_SLICES": ("total_slices", int),
    "PRIZEWHEEL_RADIUS": ("radius", float),
}


class Settings:
    """Typed, read-only view over the settings table."""

    DEFAULTS = _DEFAULTS

    window_width = int_prop("window_width", default=1280, min_v=200)
    window_height = int_prop("window_height", default=960, min_v=200)
    center_offset_x = int_prop("center_offset_x", default=40)
    tick_interval_ms = int_prop("tick_interval_ms", default=16, min_v=1)

    total_slices = int_prop("total_slices", default=26)
    radius = float_prop("radius", default=300.0)
    frame_size = int_prop("frame_size", default=600)
    pin_radius = int_prop("pin_radius", default=30, min_v=1)

    translucency_threshold = int_prop("translucency_threshold", default=200, min_v=0, max_v=256)
    neighbor_reach = int_prop("neighbor_reach", default=3, min_v=0)

    render_workers = int_prop("render_workers", default=4, min_v=1, max_v=64)

    spin_increment_min = int_prop("spin_increment_min", default=10, min_v=1)
    spin_increment_max = int_prop("spin_increment_max", default=30, min_v=2)
    idle_threshold = float_prop("idle_threshold", default=0.2, min_v=0.0)
    pointer_degrees = float_prop("pointer_degrees", default=0.0)
    slow_decay = float_prop("slow_decay", default=0.995, min_v=0.0, max_v=0.9999)
    fast_decay = float_prop("fast_decay", default=0.99, min_v=0.0, max_v=0.9999)

    def __init__(self, overrides: Mapping[str, object] | None = None, *, environ: Mapping[str, str] | None = None):
        self._settings: dict = dict(self.DEFAULTS)
        self._apply_env(os.environ if environ is None else environ)
        if overrides:
            self._settings.update(overrides)

    def _apply_env(self, environ: Mapping[str, str]) -> None:
        for var, (key, parse) in _ENV_OVERRIDES.items():
            raw = environ.get(var)
            if raw is None or not str(raw).strip():
                continue
            try:
                self._settings[key] = parse(str(raw).strip())
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", var, raw)

    @property
    def mask_radius(self) -> float:
        """Gap-fill mask radius in output-frame pixels (half the frame edge)."""
        return self.frame_size / 2.0
