# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Base class and interpolation helpers shared by all color spaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from huekit.schema.color import Color, Fraction, FractionLike

S = TypeVar("S", bound="ColorSpace")


def clamp(lower: float, upper: float, value: float) -> float:
    """Restrict value to [lower, upper]."""
    return max(lower, min(upper, value))


def mod_positive(value: float, modulus: float) -> float:
    """Remainder with the sign of the modulus, never equal to the modulus."""
    result = value % modulus
    return 0.0 if result >= modulus else result


def as_fraction(fraction: FractionLike) -> float:
    """Clamped float value of a Fraction or plain number."""
    if isinstance(fraction, Fraction):
        return fraction.value
    return Fraction(fraction).value


def interpolate(a: float, b: float, fraction: float) -> float:
    return a + fraction * (b - a)


def interpolate_angle(a: float, b: float, fraction: float) -> float:
    """
    Interpolate two hues in degrees along the shorter arc.

    The result is normalized into [0, 360).
    """
    delta = ((b - a) % 360.0 + 540.0) % 360.0 - 180.0
    return mod_positive(a + fraction * delta, 360.0)


def interpolate_hue_pair(
    h1: float, h2: float, gray1: bool, gray2: bool, fraction: float
) -> float:
    """
    Hue of a mix where either operand may be gray.

    A gray operand has no meaningful hue, so it adopts the other's. When
    both are gray the first hue is kept.
    """
    if gray1 and not gray2:
        h1 = h2
    elif gray2 and not gray1:
        h2 = h1
    elif gray1 and gray2:
        h2 = h1
    return interpolate_angle(h1, h2, fraction)


class ColorSpace(ABC):
    """
    A color space that colors can be converted into and mixed in.

    Subclasses are frozen dataclasses whose last field is ``alpha``.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_color(cls: type[S], color: Color) -> S:
        """Coordinates of color in this space."""

    @abstractmethod
    def into_color(self) -> Color:
        """Back to the canonical color."""

    @abstractmethod
    def mix(self: S, other: S, fraction: FractionLike) -> S:
        """Interpolate toward other. Alpha is always interpolated linearly."""
