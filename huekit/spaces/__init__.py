# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color spaces, conversions and mixing.

Every space converts to and from the canonical Color. The mixable spaces
are registered by name so a caller can choose one at runtime:

    from huekit.spaces import mix, mixer

    mix(Color.red(), Color.blue(), 0.5, "hsl")
    scale.sample(0.25, mixer("lab"))
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from huekit.exceptions import UnknownColorSpaceError
from huekit.schema.color import Color, FractionLike
from huekit.spaces.base import ColorSpace, interpolate, interpolate_angle
from huekit.spaces.cmyk import CMYK
from huekit.spaces.delta_e import cie76, ciede2000
from huekit.spaces.hsl import HSLA
from huekit.spaces.hsv import HSVA
from huekit.spaces.hwb import HWBA
from huekit.spaces.lab import LCh, Lab
from huekit.spaces.lms import LMS, ColorblindnessType, simulate_colorblindness
from huekit.spaces.luv import LChuv, Luv
from huekit.spaces.oklab import OKLCh, OKLab
from huekit.spaces.rgb import RGBA, RGBA8
from huekit.spaces.xyz import XYZ

logger = logging.getLogger(__name__)


# Mixable spaces by name
SPACES: dict[str, type[ColorSpace]] = {
    "rgb": RGBA,
    "hsl": HSLA,
    "hsv": HSVA,
    "hwb": HWBA,
    "lab": Lab,
    "lch": LCh,
    "luv": Luv,
    "lchuv": LChuv,
    "oklab": OKLab,
    "oklch": OKLCh,
    "xyz": XYZ,
    "lms": LMS,
}

SpaceLike = Union[str, type]
MixFunction = Callable[[Color, Color, FractionLike], Color]


def get_space(space: SpaceLike) -> type[ColorSpace]:
    """
    Resolve a registry name (case-insensitive) or a ColorSpace type.

    Raises:
        UnknownColorSpaceError: If the name is not registered.
    """
    if isinstance(space, type) and issubclass(space, ColorSpace):
        return space
    if not isinstance(space, str):
        raise UnknownColorSpaceError(repr(space))

    try:
        return SPACES[space.strip().lower()]
    except KeyError:
        raise UnknownColorSpaceError(space) from None


def mix(a: Color, b: Color, fraction: FractionLike, space: SpaceLike = "lab") -> Color:
    """Interpolate from a to b in the given space."""
    cls = get_space(space)
    return cls.from_color(a).mix(cls.from_color(b), fraction).into_color()


def mixer(space: SpaceLike) -> MixFunction:
    """A mixing function bound to one space, e.g. for ColorScale.sample."""
    cls = get_space(space)
    logger.debug("Mixing in %s", cls.__name__)

    def _mix(a: Color, b: Color, fraction: FractionLike) -> Color:
        return cls.from_color(a).mix(cls.from_color(b), fraction).into_color()

    return _mix


__all__ = [
    # Registry and mixing
    "SPACES",
    "ColorSpace",
    "get_space",
    "mix",
    "mixer",
    "interpolate",
    "interpolate_angle",
    # Space types
    "RGBA",
    "RGBA8",
    "HSLA",
    "HSVA",
    "HWBA",
    "Lab",
    "LCh",
    "Luv",
    "LChuv",
    "OKLab",
    "OKLCh",
    "CMYK",
    "LMS",
    "XYZ",
    # Color difference
    "cie76",
    "ciede2000",
    # Colorblindness
    "ColorblindnessType",
    "simulate_colorblindness",
]
