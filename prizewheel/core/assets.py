from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from prizewheel.core.config import asset_dirs
from prizewheel.core.utils.exceptions import AssetLoadError

logger = logging.getLogger(__name__)

BACKGROUND_IMAGE = "gameshow.png"
POINTER_IMAGE = "arrow.png"


def find_asset(name: str) -> Path:
    """Return the first existing *name* under the asset directories.

    Resolution order:
    1) PRIZEWHEEL_ASSETS_DIR
    2) `<repo>/assets`
    3) `./assets`
    """

    searched: list[str] = []
    for d in asset_dirs():
        cand = d / name
        searched.append(str(cand))
        if cand.is_file():
            return cand
    raise AssetLoadError(name, searched)


def load_asset(name: str) -> Image.Image:
    path = find_asset(name)
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except OSError as exc:
        raise AssetLoadError(name, [str(path)]) from exc


def load_background(width: int, height: int) -> Image.Image:
    img = load_asset(BACKGROUND_IMAGE)
    return img.resize((int(width), int(height)), Image.Resampling.BICUBIC)


def load_pointer(scale: float = 0.25) -> Image.Image:
    """Pointer image mirrored to face left, scaled by *scale*."""

    img = load_asset(POINTER_IMAGE).transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    w = max(1, int(round(img.width * scale)))
    h = max(1, int(round(img.height * scale)))
    logger.debug("Pointer image %dx%d scaled to %dx%d", img.width, img.height, w, h)
    return img.resize((w, h), Image.Resampling.BICUBIC)
