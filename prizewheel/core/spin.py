"""Spin dynamics: which cached frame to show on each animation tick."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass
class SpinState:
    """Angular velocity and position of the wheel.

    ``rotation`` is degrees per tick, ``current_degrees`` stays in [0, 360).
    The wheel counts as idle once ``rotation`` drops to ``idle_threshold``.
    """

    rotation: float = 0.0
    current_degrees: float = 0.0
    shown_angle: int = 0
    idle_threshold: float = 0.2
    slow_decay: float = 0.995
    fast_decay: float = 0.99
    increment_min: int = 10
    increment_max: int = 30

    @classmethod
    def from_settings(cls, settings) -> "SpinState":
        return cls(
            idle_threshold=settings.idle_threshold,
            slow_decay=settings.slow_decay,
            fast_decay=settings.fast_decay,
            increment_min=settings.spin_increment_min,
            increment_max=max(settings.spin_increment_max, settings.spin_increment_min + 1),
        )

    @property
    def is_spinning(self) -> bool:
        return self.rotation > self.idle_threshold

    def trigger(self, rng: random.Random | None = None) -> int:
        """Kick the wheel; returns the velocity added."""
        rng = rng or random
        boost = rng.randrange(self.increment_min, self.increment_max)
        self.rotation += boost
        return boost

    def decay(self) -> None:
        # Two regimes: gentler decay below 1 degree per tick.
        self.rotation *= self.slow_decay if self.rotation < 1 else self.fast_decay

    def tick(self) -> int | None:
        """Advance one frame. Returns the angle to display, or None when idle."""

        if not self.is_spinning:
            return None
        self.shown_angle = int(math.floor(self.current_degrees)) % 360
        self.current_degrees = (self.current_degrees + self.rotation) % 360.0
        self.decay()
        return self.shown_angle


def selected_slice_index(angle: float, total_slices: int, pointer_degrees: float = 0.0) -> int:
    """Index of the slice under the pointer after rotating the disc by *angle*.

    Frames rotate the disc counter-clockwise on screen, which moves a slice
    centered at screen angle ``i * span`` to ``i * span - angle``.
    """

    span = 360.0 / total_slices
    return int(math.floor((pointer_degrees + angle) / span + 0.5)) % total_slices
