"""Pre-rendered wheel frames, one per whole degree.

The disc never changes after composition, so every orientation the
animation can show is rendered once up front. Per-tick work is then a
dictionary lookup.
"""

from __future__ import annotations

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from types import MappingProxyType
from typing import Iterator, Mapping

from PIL import Image

from prizewheel.core.gap_fill import NEIGHBOR_REACH, TRANSLUCENCY_THRESHOLD, fill_gaps_from_neighbors
from prizewheel.core.utils.exceptions import WheelConfigError
from prizewheel.core.wheel_image import ComposedDisc, trim_transparent

logger = logging.getLogger(__name__)

FRAME_COUNT = 360


def frame_key(angle: float) -> str:
    """Cache key for *angle*: whole degrees, wrapped into 0..359."""
    return str(int(math.floor(angle)) % FRAME_COUNT)


def render_frame(
    disc: Image.Image,
    angle: int,
    size: int,
    *,
    mask_radius: float | None = None,
    threshold: int = TRANSLUCENCY_THRESHOLD,
    reach: int = NEIGHBOR_REACH,
) -> Image.Image:
    """Rotate *disc* counter-clockwise by *angle* degrees into a repaired size x size frame.

    *disc* itself is left untouched; rotation works on a new image.
    """

    rotated = disc.rotate(angle, resample=Image.Resampling.BICUBIC, expand=True)
    frame = trim_transparent(rotated).resize((size, size), Image.Resampling.BICUBIC)
    radius = size / 2.0 if mask_radius is None else float(mask_radius)
    fill_gaps_from_neighbors(frame, radius, threshold=threshold, reach=reach)
    return frame


class RotationCache:
    """Read-only mapping from "0".."359" to finished frames."""

    def __init__(self, frames: Mapping[str, Image.Image]):
        expected = {str(a) for a in range(FRAME_COUNT)}
        if set(frames) != expected:
            missing = sorted(expected - set(frames), key=int)
            raise ValueError(f"rotation cache needs exactly {FRAME_COUNT} frames; missing {missing[:5]}...")
        self._frames = MappingProxyType(dict(frames))

    @classmethod
    def build(
        cls,
        disc: ComposedDisc | Image.Image,
        *,
        size: int,
        mask_radius: float | None = None,
        workers: int = 1,
        threshold: int = TRANSLUCENCY_THRESHOLD,
        reach: int = NEIGHBOR_REACH,
    ) -> "RotationCache":
        """Render all frames; returns only once every frame is finished."""

        if size <= 0:
            raise WheelConfigError(f"frame size must be positive, got {size!r}")

        source = disc.image if isinstance(disc, ComposedDisc) else disc
        source.load()
        render = partial(
            render_frame,
            source,
            size=int(size),
            mask_radius=mask_radius,
            threshold=threshold,
            reach=reach,
        )

        started = time.monotonic()
        angles = range(FRAME_COUNT)
        if workers <= 1:
            rendered = [render(a) for a in angles]
        else:
            # Frames are independent; pool.map keeps them in angle order.
            # Only Pillow's rotate/resize overlap here: the neighbor-fill
            # loop is pure Python and holds the GIL.
            with ThreadPoolExecutor(max_workers=int(workers), thread_name_prefix="prizewheel-frame") as pool:
                rendered = list(pool.map(render, angles))

        logger.info(
            "Rendered %d wheel frames at %dx%d in %.2fs (workers=%d)",
            FRAME_COUNT,
            size,
            size,
            time.monotonic() - started,
            max(1, int(workers)),
        )
        return cls({str(a): img for a, img in zip(angles, rendered)})

    @property
    def frames(self) -> Mapping[str, Image.Image]:
        return self._frames

    @property
    def size(self) -> tuple[int, int]:
        return self._frames["0"].size

    def frame(self, angle: float) -> Image.Image:
        return self._frames[frame_key(angle)]

    def items(self):
        return self._frames.items()

    def keys(self):
        return self._frames.keys()

    def __getitem__(self, key: str) -> Image.Image:
        return self._frames[key]

    def __contains__(self, key: object) -> bool:
        return key in self._frames

    def __iter__(self) -> Iterator[str]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)
