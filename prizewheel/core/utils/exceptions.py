from __future__ import annotations


class WheelConfigError(ValueError):
    """Raised when a wheel is requested with impossible geometry or no content.

    Checked before any polygon or raster work starts.
    """


class AssetLoadError(RuntimeError):
    """Raised when a scene image (background, pointer) cannot be loaded."""

    def __init__(self, name: str, searched: list[str] | None = None) -> None:
        self.name = name
        self.searched = list(searched or [])
        detail = f" (searched: {', '.join(self.searched)})" if self.searched else ""
        super().__init__(f"Could not load asset {name!r}{detail}")
