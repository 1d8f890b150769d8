# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
HWB (hue, whiteness, blackness), derived from HSV.

See: https://en.wikipedia.org/wiki/HWB_color_model
"""

from __future__ import annotations

from dataclasses import dataclass

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_css_alpha, format_fixed, max_precision, wrap_hue
from huekit.spaces.base import (
    ColorSpace,
    as_fraction,
    clamp,
    interpolate,
    interpolate_hue_pair,
)
from huekit.spaces.hsv import HSVA

# Whiteness + blackness at or above 1 - GRAY_EPSILON counts as gray when mixing
GRAY_EPSILON = 1e-4


@dataclass(frozen=True, slots=True)
class HWBA(ColorSpace):
    """
    HWB color with alpha.

    Attributes:
        h: Hue in degrees [0, 360)
        w: Whiteness [0, 1]
        b: Blackness [0, 1]
    """
    h: float
    w: float
    b: float
    alpha: float = 1.0

    @property
    def is_gray(self) -> bool:
        return self.w + self.b >= 1.0 - GRAY_EPSILON

    @classmethod
    def from_color(cls, color: Color) -> HWBA:
        hsva = HSVA.from_color(color)
        return cls(hsva.h, (1.0 - hsva.s) * hsva.v, 1.0 - hsva.v, color.alpha)

    def into_color(self) -> Color:
        if self.w + self.b >= 1.0:
            gray = self.w / (self.w + self.b)
            return Color.from_rgba_float(gray, gray, gray, self.alpha)

        w = clamp(0.0, 1.0, self.w)
        b = clamp(0.0, 1.0, self.b)
        value = 1.0 - b
        saturation = 1.0 - w / value if value > 0.0 else 0.0
        return HSVA(self.h, saturation, value, self.alpha).into_color()

    def mix(self, other: HWBA, fraction: FractionLike) -> HWBA:
        f = as_fraction(fraction)
        return HWBA(
            interpolate_hue_pair(self.h, other.h, self.is_gray, other.is_gray, f),
            interpolate(self.w, other.w, f),
            interpolate(self.b, other.b, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``hwb(91 54.1% 38.3%)`` or ``hwb(90 50% 25% / 0.8)``."""
        return (
            f"hwb({format_fixed(wrap_hue(self.h, 0), 0)} "
            f"{max_precision(100.0 * self.w, 1)}% "
            f"{max_precision(100.0 * self.b, 1)}%"
            f"{format_css_alpha(self.alpha, format)})"
        )
