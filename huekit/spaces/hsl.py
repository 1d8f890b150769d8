# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
HSL (hue, saturation, lightness) over gamma-encoded sRGB.

See: https://en.wikipedia.org/wiki/HSL_and_HSV
"""

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
from huekit.spaces.base import (
    ColorSpace,
    as_fraction,
    clamp,
    interpolate,
    interpolate_hue_pair,
    mod_positive,
)
from huekit.spaces.rgb import RGBA

# Saturation below which a color counts as gray when mixing
GRAY_SATURATION = 1e-4

# Chroma below which the hue is undefined (absorbs XYZ round-trip noise)
_ACHROMATIC_CHROMA = 1e-10


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert sRGB floats to (hue in degrees, saturation, lightness)."""
    high = max(r, g, b)
    low = min(r, g, b)
    chroma = high - low
    lightness = (high + low) / 2.0

    if chroma < _ACHROMATIC_CHROMA:
        return 0.0, 0.0, lightness

    if high == r:
        sector = mod_positive((g - b) / chroma, 6.0)
    elif high == g:
        sector = (b - r) / chroma + 2.0
    else:
        sector = (r - g) / chroma + 4.0

    denominator = 1.0 - abs(2.0 * lightness - 1.0)
    saturation = chroma / denominator if denominator > 0.0 else 0.0
    return mod_positive(60.0 * sector, 360.0), saturation, lightness


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """Convert HSL to sRGB floats. Saturation and lightness are clamped to [0, 1]."""
    saturation = clamp(0.0, 1.0, saturation)
    lightness = clamp(0.0, 1.0, lightness)

    h_s = mod_positive(hue, 360.0) / 60.0
    chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
    m = lightness - chroma / 2.0
    x = chroma * (1.0 - abs(h_s % 2.0 - 1.0))

    if h_s < 1.0:
        r, g, b = chroma, x, 0.0
    elif h_s < 2.0:
        r, g, b = x, chroma, 0.0
    elif h_s < 3.0:
        r, g, b = 0.0, chroma, x
    elif h_s < 4.0:
        r, g, b = 0.0, x, chroma
    elif h_s < 5.0:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


@dataclass(frozen=True, slots=True)
class HSLA(ColorSpace):
    """
    HSL color with alpha.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        l: Lightness (0.0 = black, 1.0 = white)
    """
    h: float
    s: float
    l: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> HSLA:
        c = RGBA.from_color(color)
        return cls(*rgb_to_hsl(c.r, c.g, c.b), color.alpha)

    def into_color(self) -> Color:
        return Color.from_rgba_float(*hsl_to_rgb(self.h, self.s, self.l), self.alpha)

    def mix(self, other: HSLA, fraction: FractionLike) -> HSLA:
        f = as_fraction(fraction)
        return HSLA(
            interpolate_hue_pair(
                self.h, other.h, self.s < GRAY_SATURATION, other.s < GRAY_SATURATION, f
            ),
            interpolate(self.s, other.s, f),
            interpolate(self.l, other.l, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``hsl(91, 54.1%, 98.3%)``."""
        sep = separator(format)
        prefix = "hsl" if self.alpha == 1.0 else "hsla"
        return (
            f"{prefix}({format_fixed(wrap_hue(self.h, 0), 0)}{sep}"
            f"{format_fixed(100.0 * self.s, 1)}%{sep}"
            f"{format_fixed(100.0 * self.l, 1)}%"
            f"{format_legacy_alpha(self.alpha, format)})"
        )
