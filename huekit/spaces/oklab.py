# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
OKLab and OKLCh.

OKLCH:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue, ≈330=pink/red)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_css_alpha, max_precision, wrap_hue
from huekit.spaces.base import ColorSpace, as_fraction, interpolate, interpolate_hue_pair
from huekit.spaces.transfer import oklab_to_xyz, polar_to_rect, rect_to_polar, xyz_to_oklab

# OKLCh chroma below which a color counts as gray when mixing
GRAY_CHROMA = 0.0004


@dataclass(frozen=True, slots=True)
class OKLab(ColorSpace):
    l: float
    a: float
    b: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> OKLab:
        l, a, b = xyz_to_oklab(np.array([color.x, color.y, color.z]))
        return cls(float(l), float(a), float(b), color.alpha)

    def into_color(self) -> Color:
        x, y, z = oklab_to_xyz(np.array([self.l, self.a, self.b]))
        return Color(float(x), float(y), float(z), self.alpha)

    def mix(self, other: OKLab, fraction: FractionLike) -> OKLab:
        f = as_fraction(fraction)
        return OKLab(
            interpolate(self.l, other.l, f),
            interpolate(self.a, other.a, f),
            interpolate(self.b, other.b, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``oklab(0.628 0.225 0.126)``."""
        channels = " ".join(max_precision(v, 3) for v in (self.l, self.a, self.b))
        return f"oklab({channels}{format_css_alpha(self.alpha, format)})"


@dataclass(frozen=True, slots=True)
class OKLCh(ColorSpace):
    l: float
    c: float
    h: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> OKLCh:
        lab = OKLab.from_color(color)
        l, c, h = rect_to_polar(np.array([lab.l, lab.a, lab.b]))
        return cls(float(l), float(c), float(h), color.alpha)

    def into_color(self) -> Color:
        l, a, b = polar_to_rect(np.array([self.l, self.c, self.h]))
        return OKLab(float(l), float(a), float(b), self.alpha).into_color()

    def mix(self, other: OKLCh, fraction: FractionLike) -> OKLCh:
        f = as_fraction(fraction)
        return OKLCh(
            interpolate(self.l, other.l, f),
            interpolate(self.c, other.c, f),
            interpolate_hue_pair(self.h, other.h, self.c < GRAY_CHROMA, other.c < GRAY_CHROMA, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``oklch(0.628 0.258 29.23)``."""
        return (
            f"oklch({max_precision(self.l, 3)} {max_precision(self.c, 3)} "
            f"{max_precision(wrap_hue(self.h, 2), 2)}{format_css_alpha(self.alpha, format)})"
        )
