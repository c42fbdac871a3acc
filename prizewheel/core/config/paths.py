"""Asset path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def repo_root() -> Path:
    # <root>/prizewheel/core/config/paths.py
    return Path(__file__).resolve().parents[3]


def asset_dirs() -> list[Path]:
    """Return candidate directories holding scene images, in lookup order.

    Priority:
    - PRIZEWHEEL_ASSETS_DIR
    - <repo>/assets
    - ./assets
    """

    dirs: list[Path] = []
    p = os.environ.get("PRIZEWHEEL_ASSETS_DIR")
    if p:
        dirs.append(Path(p))

    dirs.append(repo_root() / "assets")
    cwd_assets = Path.cwd() / "assets"
    if cwd_assets not in dirs:
        dirs.append(cwd_assets)
    return dirs
