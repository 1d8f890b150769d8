# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Value types: the canonical Color and color scales.

All types here are immutable except ColorScale, which collects stops.
"""

from huekit.schema.color import (
    TEXT_COLOR_THRESHOLD,
    TOLERANCE,
    Color,
    Fraction,
    FractionLike,
)
from huekit.schema.scale import ColorScale, ColorStop, MixFunction

__all__ = [
    # Canonical color
    "Color",
    "Fraction",
    "FractionLike",
    "TOLERANCE",
    "TEXT_COLOR_THRESHOLD",
    # Scales
    "ColorStop",
    "ColorScale",
    "MixFunction",
]
