#!/usr/bin/env python3
"""Wheel of Selection - spin a prize wheel with the space bar.

The wheel images are built off the Tk thread; the window only starts
animating once every rotation frame exists.
"""

from __future__ import annotations

import logging
import os
import random

import tkinter as tk
from tkinter import ttk

from PIL import Image, ImageTk

from prizewheel.core.assets import load_background, load_pointer
from prizewheel.core.commands import run_command
from prizewheel.core.config import Settings, WheelConfig
from prizewheel.core.palette import rgba_to_hex
from prizewheel.core.pipeline import WheelAssets, build_wheel
from prizewheel.core.spin import SpinState
from prizewheel.gui.utils import center_window_on_screen, run_in_thread


logger = logging.getLogger(__name__)

LEGEND_BOX = (15, 15, 300, 420)
LEGEND_FILL = (180, 180, 180, 200)
LEGEND_TEXT_X = 20
LEGEND_TEXT_Y = 32
LEGEND_LINE_H = 28
# Pointer image top-left, relative to the wheel center.
POINTER_OFFSET = (270, -100)


class WheelWindow:
    """Tk host for one wheel scene; rebuilt from scratch on every option change."""

    def __init__(self, settings: Settings | None = None, config: WheelConfig | None = None):
        self.settings = settings or Settings()
        self.config = config or WheelConfig.from_settings(self.settings)

        self.root = tk.Tk()
        self.root.title("Wheel of Selection!")
        width = self.settings.window_width
        height = self.settings.window_height
        self.root.resizable(False, False)

        self.center_x = width / 2 + self.settings.center_offset_x
        self.center_y = height / 2

        self.canvas = tk.Canvas(self.root, width=width, height=height, highlightthickness=0, bg="#000000")
        self.canvas.pack()

        # Missing or unreadable images are fatal for the scene.
        self._background_tk = ImageTk.PhotoImage(load_background(width, height))
        self._pointer_tk = ImageTk.PhotoImage(load_pointer())
        self._legend_tk = ImageTk.PhotoImage(Image.new("RGBA", LEGEND_BOX[2:], LEGEND_FILL))

        console = ttk.Frame(self.root, padding=(10, 4))
        console.pack(fill="x")
        ttk.Label(console, text="Console:").pack(side="left", padx=(0, 8))
        self.console_entry = ttk.Entry(console)
        self.console_entry.pack(side="left", fill="x", expand=True)
        self.console_entry.bind("<Return>", self._on_console_submit)
        self.status = ttk.Label(console, text="", width=40)
        self.status.pack(side="left", padx=(10, 0))

        self.root.bind("<space>", self._on_space)

        self.spin = SpinState.from_settings(self.settings)
        self._rng = random.Random()
        self._assets: WheelAssets | None = None
        self._frames_tk: dict[str, ImageTk.PhotoImage] = {}
        self._pin_tk: ImageTk.PhotoImage | None = None
        self._wheel_item: int | None = None
        self._was_spinning = False
        self._build_generation = 0

        center_window_on_screen(self.root)
        self._start_scene()
        self.root.after(self.settings.tick_interval_ms, self._on_tick)

    # Scene lifecycle

    def _start_scene(self) -> None:
        self._build_generation += 1
        generation = self._build_generation
        config = self.config

        self._assets = None
        self.spin = SpinState.from_settings(self.settings)
        self._was_spinning = False
        self._set_status("Rendering wheel...")

        run_in_thread(
            self.root,
            lambda: build_wheel(config, self.settings),
            lambda assets: self._on_scene_built(generation, assets),
            on_error=lambda exc: self._on_scene_failed(generation, exc),
        )

    def _on_scene_built(self, generation: int, assets: WheelAssets) -> None:
        if generation != self._build_generation:
            logger.debug("Discarding superseded wheel build #%d", generation)
            return

        self._frames_tk = {key: ImageTk.PhotoImage(img) for key, img in assets.cache.items()}
        self._pin_tk = ImageTk.PhotoImage(assets.pin)
        self._assets = assets
        self._draw_scene()
        self._set_status("Press space to spin")

    def _on_scene_failed(self, generation: int, exc: BaseException) -> None:
        if generation != self._build_generation:
            logger.debug("Ignoring failure of superseded wheel build #%d: %s", generation, exc)
            return
        logger.error("Failed to build wheel", exc_info=exc)
        self._set_status(f"Error: {exc}")

    def _draw_scene(self) -> None:
        c = self.canvas
        c.delete("all")
        c.create_image(0, 0, image=self._background_tk, anchor="nw")
        c.create_image(LEGEND_BOX[0], LEGEND_BOX[1], image=self._legend_tk, anchor="nw")

        self._wheel_item = c.create_image(self.center_x, self.center_y, image=self._frames_tk["0"], anchor="center")

        for i, (name, color) in enumerate(self.config.legend_entries()):
            c.create_text(
                LEGEND_TEXT_X,
                LEGEND_TEXT_Y + i * LEGEND_LINE_H,
                text=name,
                fill=rgba_to_hex(color),
                font=("Sans", -LEGEND_LINE_H),
                anchor="w",
            )

        c.create_image(
            self.center_x + POINTER_OFFSET[0],
            self.center_y + POINTER_OFFSET[1],
            image=self._pointer_tk,
            anchor="nw",
        )
        c.create_image(self.center_x, self.center_y, image=self._pin_tk, anchor="center")

    # Animation

    def _on_tick(self) -> None:
        try:
            if self._assets is not None and self._wheel_item is not None:
                angle = self.spin.tick()
                if angle is not None:
                    self.canvas.itemconfigure(self._wheel_item, image=self._frames_tk[str(angle)])
                    self._was_spinning = True
                elif self._was_spinning:
                    self._was_spinning = False
                    self._announce_selection()
        finally:
            self.root.after(self.settings.tick_interval_ms, self._on_tick)

    def _announce_selection(self) -> None:
        if self._assets is None:
            return
        angle = self.spin.shown_angle
        label = self._assets.option_at(angle, self.settings.pointer_degrees)
        logger.info("Wheel stopped at %d degrees: %s", angle, label)
        self._set_status(f"Selected: {label}" if label is not None else "No options on the wheel")

    # Input

    def _on_space(self, event) -> None:
        if event.widget is self.console_entry or self._assets is None:
            return
        boost = self.spin.trigger(self._rng)
        logger.debug("Spin +%d (rotation now %.2f)", boost, self.spin.rotation)

    def _on_console_submit(self, _event) -> None:
        line = self.console_entry.get()
        self.console_entry.delete(0, "end")

        result = run_command(line, self.config)
        if result.message:
            self._set_status(result.message)
        if result.needs_rebuild:
            self.config = result.config
            self.root.after(0, self._start_scene)

    def _set_status(self, msg: str) -> None:
        self.status.config(text=msg)

    def run(self) -> None:
        self.root.mainloop()


def main() -> None:
    level = logging.DEBUG if os.environ.get("PRIZEWHEEL_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    WheelWindow().run()


if __name__ == "__main__":
    main()
