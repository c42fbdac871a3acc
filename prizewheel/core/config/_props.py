from __future__ import annotations


def int_prop(key: str, *, default: int, min_v: int | None = None, max_v: int | None = None) -> property:
    def _get(self) -> int:
        try:
            v = int(self._settings.get(key, default))
        except (TypeError, ValueError, OverflowError):
            v = int(default)
        if min_v is not None:
            v = max(int(min_v), v)
        if max_v is not None:
            v = min(int(max_v), v)
        return v

    return property(_get)


def float_prop(key: str, *, default: float, min_v: float | None = None, max_v: float | None = None) -> property:
    def _get(self) -> float:
        try:
            v = float(self._settings.get(key, default))
        except (TypeError, ValueError):
            v = float(default)
        if min_v is not None:
            v = max(float(min_v), v)
        if max_v is not None:
            v = min(float(max_v), v)
        return v

    return property(_get)
