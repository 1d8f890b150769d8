# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
CIELAB and its cylindrical form LCh, both relative to D65.

Lab:
- L: Lightness, 0 = black, 100 = white
- a: green (-) to red (+)
- b: blue (-) to yellow (+)

LCh:
- C: Chroma, 0 = gray
- h: Hue angle in degrees [0, 360)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_fixed, format_function, wrap_hue
from huekit.spaces.base import ColorSpace, as_fraction, interpolate, interpolate_hue_pair
from huekit.spaces.transfer import lab_to_xyz, polar_to_rect, rect_to_polar, xyz_to_lab

# LCh chroma below which a color counts as gray when mixing
GRAY_CHROMA = 0.1


@dataclass(frozen=True, slots=True)
class Lab(ColorSpace):
    l: float
    a: float
    b: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> Lab:
        l, a, b = xyz_to_lab(np.array([color.x, color.y, color.z]))
        return cls(float(l), float(a), float(b), color.alpha)

    def into_color(self) -> Color:
        x, y, z = lab_to_xyz(np.array([self.l, self.a, self.b]))
        return Color(float(x), float(y), float(z), self.alpha)

    def mix(self, other: Lab, fraction: FractionLike) -> Lab:
        f = as_fraction(fraction)
        return Lab(
            interpolate(self.l, other.l, f),
            interpolate(self.a, other.a, f),
            interpolate(self.b, other.b, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``Lab(41, 83, -93)`` or ``Lab(41, 83, -93, 0.5)``."""
        return format_function("Lab", [format_fixed(v, 0) for v in (self.l, self.a, self.b)], self.alpha, format)


@dataclass(frozen=True, slots=True)
class LCh(ColorSpace):
    l: float
    c: float
    h: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> LCh:
        lab = Lab.from_color(color)
        l, c, h = rect_to_polar(np.array([lab.l, lab.a, lab.b]))
        return cls(float(l), float(c), float(h), color.alpha)

    def into_color(self) -> Color:
        l, a, b = polar_to_rect(np.array([self.l, self.c, self.h]))
        return Lab(float(l), float(a), float(b), self.alpha).into_color()

    def mix(self, other: LCh, fraction: FractionLike) -> LCh:
        f = as_fraction(fraction)
        return LCh(
            interpolate(self.l, other.l, f),
            interpolate(self.c, other.c, f),
            interpolate_hue_pair(self.h, other.h, self.c < GRAY_CHROMA, other.c < GRAY_CHROMA, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``LCh(52, 44, 271)``."""
        channels = [format_fixed(self.l, 0), format_fixed(self.c, 0), format_fixed(wrap_hue(self.h, 0), 0)]
        return format_function("LCh", channels, self.alpha, format)
