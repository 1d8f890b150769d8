# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Field serializer: format one color as a named notation or a single channel.

``format_color(color, "hsl-hue")`` returns "330". The whole-color kinds
return the same strings as the ``Color.to_*_string`` methods; the channel
kinds print one number at a fixed precision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from huekit.serializers.base import Format, format_fixed, wrap_hue

if TYPE_CHECKING:
    from huekit.schema.color import Color


def _whole(method: str) -> Callable[[Color, Format], str]:
    def field(color: Color, format: Format) -> str:
        return getattr(color, method)(format)
    return field


def _channel(conversion: str, attribute: str, decimals: int) -> Callable[[Color, Format], str]:
    def field(color: Color, format: Format) -> str:
        value = getattr(getattr(color, conversion)(), attribute)
        return format_fixed(value, decimals)
    return field


def _hue(conversion: str, decimals: int) -> Callable[[Color, Format], str]:
    def field(color: Color, format: Format) -> str:
        return format_fixed(wrap_hue(getattr(color, conversion)().h, decimals), decimals)
    return field


def _hex(color: Color, format: Format) -> str:
    return color.to_rgb_hex_string()


def _luminance(color: Color, format: Format) -> str:
    return format_fixed(color.luminance(), 3)


def _brightness(color: Color, format: Format) -> str:
    return format_fixed(color.brightness(), 3)


def _name(color: Color, format: Format) -> str:
    from huekit.parse.named import closest_name

    return closest_name(color)


_FIELDS: dict[str, Callable[[Color, Format], str]] = {
    "rgb": _whole("to_rgb_string"),
    "rgb-float": _whole("to_rgb_float_string"),
    "hex": _hex,
    "hsl": _whole("to_hsl_string"),
    "hsl-hue": _hue("to_hsla", 0),
    "hsl-saturation": _channel("to_hsla", "s", 4),
    "hsl-lightness": _channel("to_hsla", "l", 4),
    "hsv": _whole("to_hsv_string"),
    "hsv-hue": _hue("to_hsva", 0),
    "hsv-saturation": _channel("to_hsva", "s", 4),
    "hsv-value": _channel("to_hsva", "v", 4),
    "hwb": _whole("to_hwb_string"),
    "hwb-hue": _hue("to_hwba", 0),
    "hwb-whiteness": _channel("to_hwba", "w", 4),
    "hwb-blackness": _channel("to_hwba", "b", 4),
    "xyz": _whole("to_xyz_string"),
    "lab": _whole("to_lab_string"),
    "lab-lightness": _channel("to_lab", "l", 2),
    "lab-a": _channel("to_lab", "a", 2),
    "lab-b": _channel("to_lab", "b", 2),
    "lch": _whole("to_lch_string"),
    "lab-chroma": _channel("to_lch", "c", 2),
    "lab-hue": _hue("to_lch", 2),
    "luv": _whole("to_luv_string"),
    "luv-lightness": _channel("to_luv", "l", 2),
    "luv-u": _channel("to_luv", "u", 2),
    "luv-v": _channel("to_luv", "v", 2),
    "lchuv": _whole("to_lchuv_string"),
    "luv-chroma": _channel("to_lchuv", "c", 2),
    "luv-hue": _hue("to_lchuv", 2),
    "hcl": _whole("to_hcl_string"),
    "oklab": _whole("to_oklab_string"),
    "oklch": _whole("to_oklch_string"),
    "cmyk": _whole("to_cmyk_string"),
    "luminance": _luminance,
    "brightness": _brightness,
    "name": _name,
}

FORMAT_TYPES: tuple[str, ...] = tuple(_FIELDS)


def format_color(color: Color, kind: str, format: Format = Format.SPACES) -> str:
    """
    Format a color as the notation or channel named by kind.

    Args:
        color: The color to format.
        kind: One of FORMAT_TYPES (case-insensitive).
        format: Whitespace style for the whole-color notations.

    Raises:
        ValueError: If kind is not one of FORMAT_TYPES.
    """
    try:
        field = _FIELDS[kind.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown format type {kind!r}, expected one of: {', '.join(FORMAT_TYPES)}"
        ) from None
    return field(color, format)
