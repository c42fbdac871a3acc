"""One-shot construction of everything a wheel scene displays.

Changing the option list means calling `build_wheel` again with the new
`WheelConfig`; nothing produced here is patched in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import Image

from prizewheel.core.config import Settings, WheelConfig
from prizewheel.core.geometry import Slice, build_slices
from prizewheel.core.palette import WHITE
from prizewheel.core.rotation_cache import RotationCache
from prizewheel.core.spin import selected_slice_index
from prizewheel.core.wheel_image import ComposedDisc, build_center_pin, compose_disc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WheelAssets:
    config: WheelConfig
    slices: tuple[Slice, ...]
    disc: ComposedDisc
    cache: RotationCache
    pin: Image.Image

    def option_at(self, angle: float, pointer_degrees: float = 0.0) -> str | None:
        """Option under the pointer when the frame for *angle* is displayed."""
        idx = selected_slice_index(angle, self.config.total_slices, pointer_degrees)
        return self.config.option_for_slice(idx)


def build_wheel(config: WheelConfig, settings: Settings | None = None) -> WheelAssets:
    settings = settings or Settings()
    config.validate()

    slices = tuple(build_slices(config.total_slices, config.radius, config.effective_colors()))
    disc = compose_disc(slices, config.radius)
    logger.info(
        "Building wheel: %d option(s), %d slices, disc %dx%d",
        len(config.options),
        config.total_slices,
        disc.width,
        disc.height,
    )

    cache = RotationCache.build(
        disc,
        size=settings.frame_size,
        mask_radius=settings.mask_radius,
        workers=settings.render_workers,
        threshold=settings.translucency_threshold,
        reach=settings.neighbor_reach,
    )
    pin = build_center_pin(settings.pin_radius, WHITE, threshold=settings.translucency_threshold)
    return WheelAssets(config=config, slices=slices, disc=disc, cache=cache, pin=pin)
