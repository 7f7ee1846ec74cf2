"""RGBA colours and linear blending between them."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Color", "interpolate"]


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel}")


def _blend(start: int, end: int, t: float) -> int:
    return int(start + t * (end - start))


def interpolate(start: Color, end: Color, t: float) -> Color:
    """Blend from ``start`` (t=0) to ``end`` (t=1); t is clamped and channels truncated."""
    t = max(0.0, min(1.0, t))
    return Color(
        _blend(start.r, end.r, t),
        _blend(start.g, end.g, t),
        _blend(start.b, end.b, t),
        _blend(start.a, end.a, t),
    )