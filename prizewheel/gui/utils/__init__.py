"""Small Tk helpers shared by the wheel window."""

from __future__ import annotations

from .tk_async import run_in_thread
from .window_centering import center_window_on_screen

__all__ = [
    "center_window_on_screen",
    "run_in_thread",
]
