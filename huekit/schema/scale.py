# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color scales: colors placed at positions in [0, 1], sampled by mixing.

The mixing function is supplied by the caller, so the same scale can be
sampled in any color space (see ``huekit.spaces.mixer``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from huekit.schema.color import Color, Fraction

logger = logging.getLogger(__name__)

MixFunction = Callable[[Color, Color, Fraction], Color]


@dataclass(frozen=True, slots=True)
class ColorStop:
    """A color placed at a position from left (0.0) to right (1.0)."""
    color: Color
    position: Fraction

    def __post_init__(self) -> None:
        if not isinstance(self.position, Fraction):
            raise ValueError(f"Position must be a Fraction, got {type(self.position).__name__}")


class ColorScale:
    """
    An ordered set of color stops.

    Stops are kept sorted by position, with at most one stop per position.
    A scale needs at least two stops to be sampled.
    """

    def __init__(self) -> None:
        self._stops: list[ColorStop] = []

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        stops = ", ".join(f"{s.color.to_rgb_hex_string()}@{s.position.value:g}" for s in self._stops)
        return f"ColorScale([{stops}])"

    @property
    def stops(self) -> tuple[ColorStop, ...]:
        return tuple(self._stops)

    def add_stop(self, color: Color, position: Union[Fraction, float]) -> ColorScale:
        """
        Add a color at the given position.

        A stop already at that exact position has its color replaced.
        Returns the scale, so calls can be chained.
        """
        if not isinstance(position, Fraction):
            position = Fraction(position)

        for i, stop in enumerate(self._stops):
            if stop.position.value == position.value:
                self._stops[i] = ColorStop(color, stop.position)
                return self

        index = next(
            (i for i, stop in enumerate(self._stops) if position.value < stop.position.value),
            len(self._stops),
        )
        self._stops.insert(index, ColorStop(color, position))
        return self

    def sample(self, position: Union[Fraction, float], mix: MixFunction) -> Optional[Color]:
        """
        Color at the given position.

        Finds the nearest stop at or before the position and the nearest at
        or after it, and mixes between them. Positions beyond the outer
        stops are clamped to them.

        Returns:
            The sampled color, or None if the scale has fewer than two stops.
        """
        if len(self._stops) < 2:
            logger.debug("Cannot sample a scale with %d stop(s)", len(self._stops))
            return None

        p = position.value if isinstance(position, Fraction) else Fraction(position).value
        first, last = self._stops[0].position.value, self._stops[-1].position.value
        p = max(first, min(last, p))

        left = next(s for s in reversed(self._stops) if s.position.value <= p)
        right = next(s for s in self._stops if s.position.value >= p)

        span = right.position.value - left.position.value
        if span == 0.0:
            return left.color

        return mix(left.color, right.color, Fraction((p - left.position.value) / span))

    def samples(self, count: int, mix: MixFunction) -> list[Color]:
        """
        `count` colors evenly spaced over [0, 1].

        Empty if the scale cannot be sampled.
        """
        if count < 1 or len(self._stops) < 2:
            return []
        if count == 1:
            return [self.sample(0.0, mix)]
        return [self.sample(i / (count - 1), mix) for i in range(count)]
