# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
String formatting for colors.

The per-space notations live on the space types (``HSLA.to_color_string``
and friends) and are reached through ``Color.to_*_string``. This package
holds the shared number formatting and the field dispatcher.
"""

from huekit.serializers.base import (
    Format,
    format_css_alpha,
    format_fixed,
    format_function,
    format_legacy_alpha,
    max_precision,
    wrap_hue,
)
from huekit.serializers.fields import FORMAT_TYPES, format_color

__all__ = [
    "Format",
    "max_precision",
    "format_fixed",
    "format_css_alpha",
    "format_legacy_alpha",
    "format_function",
    "wrap_hue",
    "FORMAT_TYPES",
    "format_color",
]
