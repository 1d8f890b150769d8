# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""CIELUV and its cylindrical form LChuv, both relative to D65."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_fixed, format_function, wrap_hue
from huekit.spaces.base import ColorSpace, as_fraction, interpolate, interpolate_hue_pair
from huekit.spaces.lab import GRAY_CHROMA
from huekit.spaces.transfer import luv_to_xyz, polar_to_rect, rect_to_polar, xyz_to_luv


@dataclass(frozen=True, slots=True)
class Luv(ColorSpace):
    """
    CIELUV color with alpha.

    Attributes:
        l: Lightness, 0 = black, 100 = white
        u, v: Chromaticity coordinates scaled by lightness
    """
    l: float
    u: float
    v: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> Luv:
        l, u, v = xyz_to_luv(np.array([color.x, color.y, color.z]))
        return cls(float(l), float(u), float(v), color.alpha)

    def into_color(self) -> Color:
        x, y, z = luv_to_xyz(np.array([self.l, self.u, self.v]))
        return Color(float(x), float(y), float(z), self.alpha)

    def mix(self, other: Luv, fraction: FractionLike) -> Luv:
        f = as_fraction(fraction)
        return Luv(
            interpolate(self.l, other.l, f),
            interpolate(self.u, other.u, f),
            interpolate(self.v, other.v, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``Luv(53, 175, 38)``."""
        return format_function("Luv", [format_fixed(v, 0) for v in (self.l, self.u, self.v)], self.alpha, format)


@dataclass(frozen=True, slots=True)
class LChuv(ColorSpace):
    """
    Cylindrical CIELUV. The same color written hue-first is HCL.

    Attributes:
        l: Lightness [0, 100]
        c: Chroma, 0 = gray
        h: Hue in degrees [0, 360)
    """
    l: float
    c: float
    h: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> LChuv:
        luv = Luv.from_color(color)
        l, c, h = rect_to_polar(np.array([luv.l, luv.u, luv.v]))
        return cls(float(l), float(c), float(h), color.alpha)

    def into_color(self) -> Color:
        l, u, v = polar_to_rect(np.array([self.l, self.c, self.h]))
        return Luv(float(l), float(u), float(v), self.alpha).into_color()

    def mix(self, other: LChuv, fraction: FractionLike) -> LChuv:
        f = as_fraction(fraction)
        return LChuv(
            interpolate(self.l, other.l, f),
            interpolate(self.c, other.c, f),
            interpolate_hue_pair(self.h, other.h, self.c < GRAY_CHROMA, other.c < GRAY_CHROMA, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``LChuv(53, 179, 12)``."""
        channels = [format_fixed(self.l, 0), format_fixed(self.c, 0), format_fixed(wrap_hue(self.h, 0), 0)]
        return format_function("LChuv", channels, self.alpha, format)

    def to_hcl_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``HCL(12, 179, 53)``."""
        channels = [format_fixed(wrap_hue(self.h, 0), 0), format_fixed(self.c, 0), format_fixed(self.l, 0)]
        return format_function("HCL", channels, self.alpha, format)
