# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Huekit -- color model, conversions, parsing and formatting.

Every color is stored as CIE XYZ (D65) plus alpha and converted on demand
to RGB, HSL, HSV, HWB, Lab, LCh, Luv, LChuv, OKLab, OKLCh, CMYK and LMS.

Quick start::

    from huekit import Color, parse_color

    c = parse_color("rgb(255, 0, 153)")
    c.to_rgb_hex_string()           # "#ff0099"
    c.mix(Color.white(), 0.5, "lch")
    c.to_oklch_string()
"""

from __future__ import annotations

__version__ = "1.0.0"

# schema first: Color is needed by every other sub-package
from huekit.schema import ColorScale, ColorStop, Color, Fraction, TOLERANCE
from huekit.exceptions import ColorParseError, HuekitError, UnknownColorSpaceError
from huekit.parse import closest_name, lookup_named, parse_color, similar_colors
from huekit.serializers import FORMAT_TYPES, Format, format_color
from huekit.spaces import ColorblindnessType, SPACES, get_space, mix, mixer

__all__ = [
    # Core API
    "Color",
    "parse_color",
    "mix",
    "mixer",
    # Types
    "Fraction",
    "ColorStop",
    "ColorScale",
    "Format",
    "ColorblindnessType",
    "TOLERANCE",
    # Registry
    "SPACES",
    "get_space",
    # Named colors
    "lookup_named",
    "similar_colors",
    "closest_name",
    # Formatting
    "FORMAT_TYPES",
    "format_color",
    # Errors
    "HuekitError",
    "ColorParseError",
    "UnknownColorSpaceError",
    # Version
    "__version__",
]
