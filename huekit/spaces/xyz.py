# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""CIE XYZ (D65), the canonical space, as a mixable value type."""

from __future__ import annotations

from dataclasses import dataclass

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_function, max_precision
from huekit.spaces.base import ColorSpace, as_fraction, interpolate


@dataclass(frozen=True, slots=True)
class XYZ(ColorSpace):
    x: float
    y: float
    z: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> XYZ:
        return cls(color.x, color.y, color.z, color.alpha)

    def into_color(self) -> Color:
        return Color(self.x, self.y, self.z, self.alpha)

    def mix(self, other: XYZ, fraction: FractionLike) -> XYZ:
        f = as_fraction(fraction)
        return XYZ(
            interpolate(self.x, other.x, f),
            interpolate(self.y, other.y, f),
            interpolate(self.z, other.z, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``XYZ(0.4124, 0.2126, 0.0193)``."""
        return format_function(
            "XYZ", [max_precision(v, 4) for v in (self.x, self.y, self.z)], self.alpha, format
        )
