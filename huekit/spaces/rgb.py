# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""sRGB: gamma-encoded floats (RGBA) and 8-bit channels (RGBA8)."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from huekit.schema.color import Color, FractionLike
from huekit.serializers.base import (
    Format,
    format_fixed,
    format_legacy_alpha,
    separator,
)
from huekit.spaces.base import ColorSpace, as_fraction, clamp, interpolate
from huekit.spaces.transfer import xyz_to_srgb


def _rgb_prefix(alpha: float) -> str:
    return "rgb" if alpha == 1.0 else "rgba"


@dataclass(frozen=True, slots=True)
class RGBA(ColorSpace):
    """
    Gamma-encoded sRGB, channels nominally in [0, 1].

    Out-of-gamut colors give channels outside that range.
    """
    r: float
    g: float
    b: float
    alpha: float = 1.0

    @classmethod
    def from_color(cls, color: Color) -> RGBA:
        r, g, b = xyz_to_srgb(np.array([color.x, color.y, color.z]))
        return cls(float(r), float(g), float(b), color.alpha)

    def into_color(self) -> Color:
        return Color.from_rgba_float(self.r, self.g, self.b, self.alpha)

    def mix(self, other: RGBA, fraction: FractionLike) -> RGBA:
        f = as_fraction(fraction)
        return RGBA(
            interpolate(self.r, other.r, f),
            interpolate(self.g, other.g, f),
            interpolate(self.b, other.b, f),
            interpolate(self.alpha, other.alpha, f),
        )

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``rgb(1.000, 0.500, 0.000)``."""
        sep = separator(format)
        channels = sep.join(format_fixed(c, 3) for c in (self.r, self.g, self.b))
        return f"{_rgb_prefix(self.alpha)}({channels}{format_legacy_alpha(self.alpha, format)})"


def _to_byte(channel: float) -> int:
    # Rounding to 6 decimals first keeps values like 127.49999999999999
    # from landing on the other side of .5
    value = round(clamp(0.0, 255.0, 255.0 * channel), 6)
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class RGBA8:
    """sRGB with integer channels in [0, 255]. Used for output only."""
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @classmethod
    def from_color(cls, color: Color) -> RGBA8:
        c = RGBA.from_color(color)
        return cls(_to_byte(c.r), _to_byte(c.g), _to_byte(c.b), color.alpha)

    def into_color(self) -> Color:
        return Color.from_rgba(self.r, self.g, self.b, self.alpha)

    def to_color_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``rgb(255, 127, 4)`` or ``rgba(255, 127, 4, 0.5)``."""
        sep = separator(format)
        return (
            f"{_rgb_prefix(self.alpha)}({self.r}{sep}{self.g}{sep}{self.b}"
            f"{format_legacy_alpha(self.alpha, format)})"
        )

    def to_hex_string(self, leading_hash: bool = True, short: bool = False) -> str:
        """
        Hex notation, e.g. ``#fc0070``.

        Six digits when alpha is 1.0, eight otherwise. With ``short`` the
        three/four digit form is used when every byte repeats its nibble.
        """
        channels = [self.r, self.g, self.b]
        if self.alpha != 1.0:
            channels.append(int(math.floor(self.alpha * 255.0 + 0.5)))

        if short and all(c % 17 == 0 for c in channels):
            digits = "".join(f"{c // 17:x}" for c in channels)
        else:
            digits = "".join(f"{c:02x}" for c in channels)
        return ("#" if leading_hash else "") + digits
