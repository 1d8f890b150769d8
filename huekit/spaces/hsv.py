# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""HSV (hue, saturation, value), derived algebraically from HSL."""

from __future__ import annotations

from dataclasses import dataclass

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import (
    Format,
    format_fixed,
    format_legacy_alpha,
    separator,
    wrap_hue,
)
from huekit.spaces.base import ColorSpace, as_fraction, interpolate, interpolate_hue_pair
from huekit.spaces.hsl import GRAY_SATURATION, HSLA


def hsl_to_hsv(saturation: float, lightness: float) -> tuple[float, float]:
    """(s, l) of HSL to (s, v) of HSV; hue is shared."""
    value = lightness + saturation * min(lightness, 1.0 - lightness)
    s_v = 2.0 * (1.0 - lightness / value) if value > 0.0 else 0.0
    return s_v, value


def hsv_to_hsl(saturation: float, value: float) -> tuple[float, float]:
    """(s, v) of HSV to (s, l) of HSL."""
    lightness = value * (1.0 - saturation / 2.0)
    if 0.0 < lightness < 1.0:
        s_l = (value - lightness) / min(lightness, 1.0 - lightness)
    else:
        s_l = 0.0
    return s_l, lightness


@dataclass(frozen=True, slots=True)
class HSVA(ColorSpace):
    """
    HSV color with alpha.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        v: Value (0.0 = black)
    """
    h: float
    s: float
    v: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> HSVA:
        hsla = HSLA.from_color(color)
        s, v = hsl_to_hsv(hsla.s, hsla.l)
        return cls(hsla.h, s, v, color.alpha)

    def into_color(self) -> Color:
        s, l = hsv_to_hsl(self.s, self.v)
        return HSLA(self.h, s, l, self.alpha).into_color()

    def mix(self, other: HSVA, fraction: FractionLike) -> HSVA:
        f = as_fraction(fraction)
        return HSVA(
            interpolate_hue_pair(
                self.h, other.h, self.s < GRAY_SATURATION, other.s < GRAY_SATURATION, f
            ),
            interpolate(self.s, other.s, f),
            interpolate(self.v, other.v, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``hsv(91, 54.1%, 98.3%)``."""
        sep = separator(format)
        prefix = "hsv" if self.alpha == 1.0 else "hsva"
        return (
            f"{prefix}({format_fixed(wrap_hue(self.h, 0), 0)}{sep}"
            f"{format_fixed(100.0 * self.s, 1)}%{sep}"
            f"{format_fixed(100.0 * self.v, 1)}%"
            f"{format_legacy_alpha(self.alpha, format)})"
        )
