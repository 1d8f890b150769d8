# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
LMS cone response space and colorblindness simulation.

See: https://en.wikipedia.org/wiki/LMS_color_space
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import Format, format_function, max_precision
from huekit.spaces.base import ColorSpace, as_fraction, interpolate
from huekit.spaces.transfer import lms_to_xyz, xyz_to_lms


class ColorblindnessType(Enum):
    """Kinds of dichromacy that can be simulated."""

    PROTANOPIA = "protanopia"      # no long-wavelength (red) cones
    DEUTERANOPIA = "deuteranopia"  # no medium-wavelength (green) cones
    TRITANOPIA = "tritanopia"      # no short-wavelength (blue) cones


@dataclass(frozen=True, slots=True)
class LMS(ColorSpace):
    """Long-, medium- and short-wavelength cone responses."""
    l: float
    m: float
    s: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> LMS:
        l, m, s = xyz_to_lms(np.array([color.x, color.y, color.z]))
        return cls(float(l), float(m), float(s), color.alpha)

    def into_color(self) -> Color:
        x, y, z = lms_to_xyz(np.array([self.l, self.m, self.s]))
        return Color(float(x), float(y), float(z), self.alpha)

    def mix(self, other: LMS, fraction: FractionLike) -> LMS:
        f = as_fraction(fraction)
        return LMS(
            interpolate(self.l, other.l, f),
            interpolate(self.m, other.m, f),
            interpolate(self.s, other.s, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``LMS(0.7614, 0.3364, 0.0193)``."""
        return format_function(
            "LMS", [max_precision(v, 4) for v in (self.l, self.m, self.s)], self.alpha, format
        )


def simulate_colorblindness(color: Color, kind: ColorblindnessType) -> Color:
    """
    Replace the missing cone response with a combination of the other two.

    Coefficients from
    https://ixora.io/projects/colorblindness/color-blindness-simulation-research/
    """
    lms = LMS.from_color(color)
    l, m, s = lms.l, lms.m, lms.s

    if kind == ColorblindnessType.PROTANOPIA:
        l = 1.05118294 * m - 0.05116099 * s
    elif kind == ColorblindnessType.DEUTERANOPIA:
        m = 0.9513092 * l + 0.04866992 * s
    elif kind == ColorblindnessType.TRITANOPIA:
        s = -0.86744736 * l + 1.86727089 * m
    else:
        raise ValueError(f"Unknown colorblindness type: {kind!r}")

    return LMS(l, m, s, lms.alpha).into_color()
