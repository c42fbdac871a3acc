"""Default runtime settings.

Kept apart from `prizewheel.core.config.settings` so the table of knobs is
easy to scan.
"""

from __future__ import annotations

DEFAULTS: dict = {
    # Host window
    "window_width": 1280,
    "window_height": 960,
    # The wheel sits slightly right of the window center to leave room for
    # the legend panel.
    "center_offset_x": 40,
    "tick_interval_ms": 16,
    # Wheel geometry
    "total_slices": 26,
    "radius": 300.0,
    "frame_size": 600,
    "pin_radius": 30,
    # Gap repair
    "translucency_threshold": 200,
    "neighbor_reach": 3,
    # Frame rendering (threads; 1 renders inline)
    "render_workers": 4,
    # Spin dynamics. Increment is drawn from [min, max).
    "spin_increment_min": 10,
    "spin_increment_max": 30,
    "idle_threshold": 0.2,
    # Screen angle the pointer marks (0 = right of the hub, clockwise positive).
    "pointer_degrees": 0.0,
    "slow_decay": 0.995,
    "fast_decay": 0.99,
}
