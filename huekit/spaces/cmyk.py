# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""CMYK (naive, device-independent) derived from sRGB floats."""

from __future__ import annotations

from dataclasses import dataclass

from huekit.schema.color import Color
from huekit.serializers.base import Format, max_precision, separator
from huekit.spaces.base import clamp
from huekit.spaces.rgb import RGBA


@dataclass(frozen=True, slots=True)
class CMYK:
    """
    Cyan, magenta, yellow and key (black), each in [0, 1].

    CMYK carries no alpha; converting into a color gives alpha 1.0.
    """
    c: float
    m: float
    y: float
    k: float

    @classmethod
    def from_color(cls, color: Color) -> CMYK:
        rgba = RGBA.from_color(color)
        r, g, b = (clamp(0.0, 1.0, v) for v in (rgba.r, rgba.g, rgba.b))
        k = 1.0 - max(r, g, b)
        if 1.0 - k == 0.0:
            return cls(0.0, 0.0, 0.0, k)

        return cls(
            (1.0 - r - k) / (1.0 - k),
            (1.0 - g - k) / (1.0 - k),
            (1.0 - b - k) / (1.0 - k),
            k,
        )

    def into_color(self) -> Color:
        return Color.from_rgb_float(
            (1.0 - self.c) * (1.0 - self.k),
            (1.0 - self.m) * (1.0 - self.k),
            (1.0 - self.y) * (1.0 - self.k),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """
        e.g. ``cmyk(0, 14, 43, 47)`` (rounded percentages).

        Display only: the parser expects space-separated fractions and does
        not read this form back.
        """
        channels = (self.c, self.m, self.y, self.k)
        return f"cmyk({separator(format).join(max_precision(100.0 * v, 0) for v in channels)})"
