from __future__ import annotations

import os

import pytest


_ENV_PREFIX = "PRIZEWHEEL_"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer overrides (slice count, frame size, asset dir...) out of tests."""

    for key in list(os.environ):
        if key.startswith(_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    from prizewheel.core.logging_utils import reset_throttle

    reset_throttle()
    yield
    reset_throttle()


@pytest.fixture
def small_settings():
    """Settings small enough to render a full 360-frame cache quickly."""

    from prizewheel.core.config import Settings

    return Settings(
        {"frame_size": 40, "render_workers": 2, "pin_radius": 5, "total_slices": 12, "radius": 20.0},
        environ={},
    )
