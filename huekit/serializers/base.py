# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Base types and number formatting shared by all color string formats."""

import math
from enum import Enum
from typing import Sequence


class Format(Enum):
    """Whitespace style for color strings."""

    SPACES = "spaces"
    NO_SPACES = "no_spaces"


def separator(format: Format) -> str:
    """Argument separator for comma-separated notations."""
    return ", " if format == Format.SPACES else ","


def max_precision(value: float, precision: int) -> str:
    """
    Format value with at most `precision` decimals.

    Rounds half away from zero and drops trailing zeros:
    0.5 -> "0.5", 1.0 -> "1", 0.5005 at precision 3 -> "0.501".
    """
    factor = 10 ** precision
    # 0.5005 * 1000 is 500.49999999999994 in binary floating point
    scaled = round(abs(value) * factor, 9)
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    rounded = math.copysign(whole, value) / factor

    if rounded == 0.0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def format_css_alpha(alpha: float, format: Format) -> str:
    """
    Alpha suffix for CSS notations with a slash.

    Empty when alpha is exactly 1.0, otherwise " / 0.5" (or "/0.5").
    """
    if alpha == 1.0:
        return ""
    space = " " if format == Format.SPACES else ""
    return f"{space}/{space}{max_precision(alpha, 3)}"


def format_legacy_alpha(alpha: float, format: Format) -> str:
    """Alpha suffix for comma-separated notations: "" or ", 0.5"."""
    if alpha == 1.0:
        return ""
    return f"{separator(format)}{max_precision(alpha, 3)}"


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point formatting without a sign on values that round to zero."""
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


def format_function(name: str, channels: Sequence[str], alpha: float, format: Format) -> str:
    """Comma-separated notation ``name(c1, c2, c3[, alpha])``."""
    return f"{name}({separator(format).join(channels)}{format_legacy_alpha(alpha, format)})"


def wrap_hue(hue: float, decimals: int) -> float:
    """Hue rounded for display, with 360 written as 0."""
    rounded = round(hue, decimals)
    return 0.0 if rounded >= 360.0 else rounded
