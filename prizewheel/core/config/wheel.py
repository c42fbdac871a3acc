"""Immutable description of one wheel: what is written on it and how it is cut.

Editing the option list never mutates a `WheelConfig`; it yields a new one,
and the caller rebuilds every derived image from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

from prizewheel.core.geometry import check_geometry, slice_color_index
from prizewheel.core.palette import ColorRGBA, default_colors, to_rgba
from prizewheel.core.utils.exceptions import WheelConfigError

DEFAULT_OPTIONS: tuple[str, ...] = ("Option 1", "Option 2", "Option 3", "Option 4", "Option 5")


@dataclass(frozen=True)
class WheelConfig:
    options: tuple[str, ...] = DEFAULT_OPTIONS
    colors: tuple[ColorRGBA, ...] = field(default_factory=default_colors)
    total_slices: int = 26
    radius: float = 300.0

    def __post_init__(self) -> None:
        # Normalize list inputs so instances stay hashable and comparable.
        object.__setattr__(self, "options", tuple(str(o) for o in self.options))
        object.__setattr__(self, "colors", tuple(to_rgba(c) for c in self.colors))
        self.validate()

    def validate(self) -> None:
        check_geometry(self.total_slices, self.radius)
        if not self.colors:
            raise WheelConfigError("at least one color is required")

    @classmethod
    def from_settings(cls, settings, *, options: Sequence[str] | None = None,
                      colors: Iterable[ColorRGBA] | None = None) -> "WheelConfig":
        return cls(
            options=tuple(options) if options is not None else DEFAULT_OPTIONS,
            colors=tuple(colors) if colors is not None else default_colors(),
            total_slices=settings.total_slices,
            radius=settings.radius,
        )

    def effective_colors(self) -> tuple[ColorRGBA, ...]:
        """Colors actually painted on the wheel.

        With more colors than options the list is cut down so every color
        band on the wheel belongs to exactly one option.
        """

        if self.options and len(self.colors) > len(self.options):
            return self.colors[: len(self.options)]
        return self.colors

    def legend_entries(self) -> list[tuple[str, ColorRGBA]]:
        colors = self.effective_colors()
        return [(name, colors[i % len(colors)]) for i, name in enumerate(self.options)]

    def option_for_slice(self, slice_index: int) -> str | None:
        """Label of the option whose color band contains *slice_index*."""

        if not self.options:
            return None
        ci = slice_color_index(slice_index, self.total_slices, len(self.effective_colors()))
        return self.options[ci] if ci < len(self.options) else None

    def with_option_added(self, label: str) -> "WheelConfig":
        # No duplicate check: the same label may appear twice.
        return replace(self, options=self.options + (str(label),))

    def with_option_removed(self, label: str) -> "WheelConfig | None":
        """Drop the first exact match of *label*; None when it is absent."""

        try:
            idx = self.options.index(str(label))
        except ValueError:
            return None
        return replace(self, options=self.options[:idx] + self.options[idx + 1 :])
