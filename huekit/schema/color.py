# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color -- canonical color value.

Design principles:
- Immutable: Color and Fraction are frozen dataclasses
- Canonical: every color is stored as CIE XYZ (D65) plus alpha
- Unclamped: out-of-gamut values survive all XYZ arithmetic and are only
  clamped where an output representation requires it (8-bit RGB, percentages)
- Tolerant equality: two colors are equal when every component differs by
  at most TOLERANCE (the precision of a 16-bit channel)

Conversions into other spaces live in ``huekit.spaces``; the methods here
import them lazily so the schema stays importable on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

from huekit.serializers.base import Format

if TYPE_CHECKING:
    from huekit.spaces import (
        CMYK,
        HSLA,
        HSVA,
        HWBA,
        LCh,
        LChuv,
        LMS,
        Lab,
        Luv,
        OKLab,
        OKLCh,
        RGBA,
        RGBA8,
        XYZ,
    )
    from huekit.spaces.lms import ColorblindnessType


# =============================================================================
# Constants
# =============================================================================

# Precision of a 16-bit integer channel
TOLERANCE = 1.0 / 65536.0

# Luminance at which black and white text have equal contrast
TEXT_COLOR_THRESHOLD = 0.179


# =============================================================================
# Fraction
# =============================================================================


@dataclass(frozen=True, slots=True)
class Fraction:
    """
    A number in [0, 1], used for mix ratios and scale positions.

    Values outside the range are clamped, not rejected.
    """
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", max(0.0, min(1.0, float(self.value))))

    def __float__(self) -> float:
        return self.value


FractionLike = Union[Fraction, float]


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """
    A color in CIE XYZ (D65) with an alpha channel.

    Attributes:
        x, y, z: Tristimulus values (Y of the reference white = 1.0)
        alpha: Opacity, clamped to [0, 1]
    """
    x: float
    y: float
    z: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "alpha", max(0.0, min(1.0, float(self.alpha))))

    # Tolerance equality is not transitive, so colors are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            abs(self.x - other.x) <= TOLERANCE
            and abs(self.y - other.y) <= TOLERANCE
            and abs(self.z - other.z) <= TOLERANCE
            and abs(self.alpha - other.alpha) <= TOLERANCE
        )

    def __repr__(self) -> str:
        return f"Color.from_xyza({self.x!r}, {self.y!r}, {self.z!r}, {self.alpha!r})"

    def __str__(self) -> str:
        return self.to_hsl_string()

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, d: dict) -> Color:
        return cls(x=d["x"], y=d["y"], z=d["z"], alpha=d.get("alpha", 1.0))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_xyza(cls, x: float, y: float, z: float, alpha: float) -> Color:
        return cls(x, y, z, alpha)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float = 1.0) -> Color:
        return cls(x, y, z, alpha)

    @classmethod
    def from_rgba_float(cls, r: float, g: float, b: float, alpha: float) -> Color:
        """
        Create a color from gamma-encoded sRGB channels in [0, 1].

        Channels outside the range are kept (out-of-gamut colors).
        """
        from huekit.spaces.transfer import srgb_to_xyz

        x, y, z = srgb_to_xyz(np.array([r, g, b], dtype=np.float64))
        return cls(float(x), float(y), float(z), alpha)

    @classmethod
    def from_rgb_float(cls, r: float, g: float, b: float) -> Color:
        return cls.from_rgba_float(r, g, b, 1.0)

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, alpha: float) -> Color:
        """Create a color from sRGB channels in [0, 255]."""
        return cls.from_rgba_float(r / 255.0, g / 255.0, b / 255.0, alpha)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_hsla(cls, hue: float, saturation: float, lightness: float, alpha: float) -> Color:
        from huekit.spaces.hsl import HSLA

        return HSLA(hue, saturation, lightness, alpha).into_color()

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        return cls.from_hsla(hue, saturation, lightness, 1.0)

    @classmethod
    def from_hsva(cls, hue: float, saturation: float, value: float, alpha: float) -> Color:
        from huekit.spaces.hsv import HSVA

        return HSVA(hue, saturation, value, alpha).into_color()

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> Color:
        return cls.from_hsva(hue, saturation, value, 1.0)

    @classmethod
    def from_hwba(cls, hue: float, whiteness: float, blackness: float, alpha: float) -> Color:
        """
        Create a color from hue, whiteness and blackness.

        When whiteness + blackness >= 1 the result is the gray
        whiteness / (whiteness + blackness).
        """
        from huekit.spaces.hwb import HWBA

        return HWBA(hue, whiteness, blackness, alpha).into_color()

    @classmethod
    def from_hwb(cls, hue: float, whiteness: float, blackness: float) -> Color:
        return cls.from_hwba(hue, whiteness, blackness, 1.0)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        from huekit.spaces.lab import Lab

        return Lab(l, a, b, alpha).into_color()

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        from huekit.spaces.lab import LCh

        return LCh(l, c, h, alpha).into_color()

    @classmethod
    def from_luv(cls, l: float, u: float, v: float, alpha: float = 1.0) -> Color:
        from huekit.spaces.luv import Luv

        return Luv(l, u, v, alpha).into_color()

    @classmethod
    def from_lchuv(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        from huekit.spaces.luv import LChuv

        return LChuv(l, c, h, alpha).into_color()

    @classmethod
    def from_oklaba(cls, l: float, a: float, b: float, alpha: float) -> Color:
        from huekit.spaces.oklab import OKLab

        return OKLab(l, a, b, alpha).into_color()

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float) -> Color:
        return cls.from_oklaba(l, a, b, 1.0)

    @classmethod
    def from_oklcha(cls, l: float, c: float, h: float, alpha: float) -> Color:
        from huekit.spaces.oklab import OKLCh

        return OKLCh(l, c, h, alpha).into_color()

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> Color:
        return cls.from_oklcha(l, c, h, 1.0)

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float) -> Color:
        from huekit.spaces.cmyk import CMYK

        return CMYK(c, m, y, k).into_color()

    @classmethod
    def from_lms(cls, l: float, m: float, s: float, alpha: float = 1.0) -> Color:
        from huekit.spaces.lms import LMS

        return LMS(l, m, s, alpha).into_color()

    @classmethod
    def from_string(cls, text: str) -> Color:
        """
        Parse a color from text.

        Raises:
            ColorParseError: If no supported notation matches the whole text.
        """
        from huekit.exceptions import ColorParseError
        from huekit.parse import parse_color

        color = parse_color(text)
        if color is None:
            raise ColorParseError(text)
        return color

    # -------------------------------------------------------------------------
    # Named colors
    # -------------------------------------------------------------------------

    @classmethod
    def black(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls.from_rgb(255, 0, 0)

    @classmethod
    def green(cls) -> Color:
        return cls.from_rgb(0, 128, 0)

    @classmethod
    def blue(cls) -> Color:
        return cls.from_rgb(0, 0, 255)

    @classmethod
    def yellow(cls) -> Color:
        return cls.from_rgb(255, 255, 0)

    @classmethod
    def fuchsia(cls) -> Color:
        return cls.from_rgb(255, 0, 255)

    @classmethod
    def aqua(cls) -> Color:
        return cls.from_rgb(0, 255, 255)

    @classmethod
    def lime(cls) -> Color:
        return cls.from_rgb(0, 255, 0)

    @classmethod
    def maroon(cls) -> Color:
        return cls.from_rgb(128, 0, 0)

    @classmethod
    def olive(cls) -> Color:
        return cls.from_rgb(128, 128, 0)

    @classmethod
    def navy(cls) -> Color:
        return cls.from_rgb(0, 0, 128)

    @classmethod
    def purple(cls) -> Color:
        return cls.from_rgb(128, 0, 128)

    @classmethod
    def teal(cls) -> Color:
        return cls.from_rgb(0, 128, 128)

    @classmethod
    def silver(cls) -> Color:
        return cls.from_rgb(192, 192, 192)

    @classmethod
    def gray(cls) -> Color:
        return cls.from_rgb(128, 128, 128)

    @classmethod
    def graytone(cls, lightness: float) -> Color:
        """A gray from an HSL lightness (0.0 is black, 1.0 is white)."""
        return cls.from_hsl(0.0, 0.0, lightness)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_rgba(self) -> RGBA8:
        """8-bit sRGB, clamped to [0, 255]."""
        from huekit.spaces.rgb import RGBA8

        return RGBA8.from_color(self)

    def to_rgba_float(self) -> RGBA:
        """Gamma-encoded sRGB in [0, 1], not clamped."""
        from huekit.spaces.rgb import RGBA

        return RGBA.from_color(self)

    def to_hsla(self) -> HSLA:
        from huekit.spaces.hsl import HSLA

        return HSLA.from_color(self)

    def to_hsva(self) -> HSVA:
        from huekit.spaces.hsv import HSVA

        return HSVA.from_color(self)

    def to_hwba(self) -> HWBA:
        from huekit.spaces.hwb import HWBA

        return HWBA.from_color(self)

    def to_lab(self) -> Lab:
        from huekit.spaces.lab import Lab

        return Lab.from_color(self)

    def to_lch(self) -> LCh:
        from huekit.spaces.lab import LCh

        return LCh.from_color(self)

    def to_luv(self) -> Luv:
        from huekit.spaces.luv import Luv

        return Luv.from_color(self)

    def to_lchuv(self) -> LChuv:
        from huekit.spaces.luv import LChuv

        return LChuv.from_color(self)

    def to_oklab(self) -> OKLab:
        from huekit.spaces.oklab import OKLab

        return OKLab.from_color(self)

    def to_oklch(self) -> OKLCh:
        from huekit.spaces.oklab import OKLCh

        return OKLCh.from_color(self)

    def to_cmyk(self) -> CMYK:
        from huekit.spaces.cmyk import CMYK

        return CMYK.from_color(self)

    def to_xyz(self) -> XYZ:
        from huekit.spaces.xyz import XYZ

        return XYZ.from_color(self)

    def to_lms(self) -> LMS:
        from huekit.spaces.lms import LMS

        return LMS.from_color(self)

    def to_u32(self) -> int:
        """Pack the 8-bit RGB channels as 0xRRGGBB."""
        rgba = self.to_rgba()
        return (rgba.r << 16) | (rgba.g << 8) | rgba.b

    # -------------------------------------------------------------------------
    # String formats
    # -------------------------------------------------------------------------

    def to_rgb_string(self, format: Format = Format.SPACES) -> str:
        """e.g. ``rgb(255, 127, 4)`` or ``rgba(255, 127, 4, 0.5)``."""
        return self.to_rgba().to_color_string(format)

    def to_rgb_float_string(self, format: Format = Format.SPACES) -> str:
        return self.to_rgba_float().to_color_string(format)

    def to_rgb_hex_string(self, leading_hash: bool = True, short: bool = False) -> str:
        """e.g. ``#ff7f04``; alpha below 1 appends a fourth byte."""
        return self.to_rgba().to_hex_string(leading_hash=leading_hash, short=short)

    def to_hsl_string(self, format: Format = Format.SPACES) -> str:
        return self.to_hsla().to_color_string(format)

    def to_hsv_string(self, format: Format = Format.SPACES) -> str:
        return self.to_hsva().to_color_string(format)

    def to_hwb_string(self, format: Format = Format.SPACES) -> str:
        return self.to_hwba().to_color_string(format)

    def to_lab_string(self, format: Format = Format.SPACES) -> str:
        return self.to_lab().to_color_string(format)

    def to_lch_string(self, format: Format = Format.SPACES) -> str:
        return self.to_lch().to_color_string(format)

    def to_luv_string(self, format: Format = Format.SPACES) -> str:
        return self.to_luv().to_color_string(format)

    def to_lchuv_string(self, format: Format = Format.SPACES) -> str:
        return self.to_lchuv().to_color_string(format)

    def to_hcl_string(self, format: Format = Format.SPACES) -> str:
        """LChuv written in hue, chroma, luminance order."""
        return self.to_lchuv().to_hcl_string(format)

    def to_oklab_string(self, format: Format = Format.SPACES) -> str:
        return self.to_oklab().to_color_string(format)

    def to_oklch_string(self, format: Format = Format.SPACES) -> str:
        return self.to_oklch().to_color_string(format)

    def to_cmyk_string(self, format: Format = Format.SPACES) -> str:
        return self.to_cmyk().to_color_string(format)

    def to_xyz_string(self, format: Format = Format.SPACES) -> str:
        return self.to_xyz().to_color_string(format)

    def to_lms_string(self, format: Format = Format.SPACES) -> str:
        return self.to_lms().to_color_string(format)

    # -------------------------------------------------------------------------
    # Derived queries
    # -------------------------------------------------------------------------

    def _displayable_rgb(self) -> tuple[float, float, float]:
        # WCAG formulas are only defined inside the sRGB gamut
        c = self.to_rgba_float()
        return tuple(min(max(v, 0.0), 1.0) for v in (c.r, c.g, c.b))

    def brightness(self) -> float:
        """
        Perceived brightness in [0, 1].

        See: https://www.w3.org/TR/AERT#color-contrast
        """
        r, g, b = self._displayable_rgb()
        return (299.0 * r + 587.0 * g + 114.0 * b) / 1000.0

    def is_light(self) -> bool:
        return self.brightness() > 0.5

    def luminance(self) -> float:
        """
        WCAG relative luminance (0.0 for black, 1.0 for white).

        See: https://www.w3.org/TR/WCAG20/#relativeluminancedef
        """
        def f(s: float) -> float:
            if s <= 0.03928:
                return s / 12.92
            return ((s + 0.055) / 1.055) ** 2.4

        r, g, b = self._displayable_rgb()
        return 0.2126 * f(r) + 0.7152 * f(g) + 0.0722 * f(b)

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio in [1, 21], symmetric in its arguments."""
        l_self = self.luminance()
        l_other = other.luminance()
        lighter, darker = max(l_self, l_other), min(l_self, l_other)
        return (lighter + 0.05) / (darker + 0.05)

    def text_color(self) -> Color:
        """Black or white, whichever reads better on this background."""
        if self.luminance() > TEXT_COLOR_THRESHOLD:
            return Color.black()
        return Color.white()

    def distance_delta_e_cie76(self, other: Color) -> float:
        from huekit.spaces.delta_e import cie76

        return cie76(self.to_lab(), other.to_lab())

    def distance_delta_e_ciede2000(self, other: Color) -> float:
        from huekit.spaces.delta_e import ciede2000

        return ciede2000(self.to_lab(), other.to_lab())

    # -------------------------------------------------------------------------
    # Operations (all return new colors)
    # -------------------------------------------------------------------------

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.x, self.y, self.z, alpha)

    def _adjust_hsl(
        self, hue: float = 0.0, saturation: float = 0.0, lightness: float = 0.0
    ) -> Color:
        hsla = self.to_hsla()
        return Color.from_hsla(
            hsla.h + hue, hsla.s + saturation, hsla.l + lightness, self.alpha
        )

    def rotate_hue(self, delta: float) -> Color:
        return self._adjust_hsl(hue=delta)

    def complementary(self) -> Color:
        return self.rotate_hue(180.0)

    def lighten(self, f: float) -> Color:
        """Add f (between -1 and 1) to the HSL lightness."""
        return self._adjust_hsl(lightness=f)

    def darken(self, f: float) -> Color:
        return self.lighten(-f)

    def saturate(self, f: float) -> Color:
        """Add f (between -1 and 1) to the HSL saturation."""
        return self._adjust_hsl(saturation=f)

    def desaturate(self, f: float) -> Color:
        return self.saturate(-f)

    def to_gray(self) -> Color:
        """A gray with the same CIE lightness."""
        gray = Color.from_lch(self.to_lch().l, 0.0, 0.0)
        return Color.from_hsla(0.0, 0.0, gray.to_hsla().l, self.alpha)

    def simulate_colorblindness(self, kind: ColorblindnessType) -> Color:
        from huekit.spaces.lms import simulate_colorblindness

        return simulate_colorblindness(self, kind)

    def composite(self, source: Color) -> Color:
        """
        Place source over this color (alpha compositing in sRGB).

            αo = αs + αb(1 - αs)
            Co = (Cs αs + Cb αb (1 - αs)) / αo
        """
        backdrop = self.to_rgba_float()
        top = source.to_rgba_float()

        alpha = top.alpha + backdrop.alpha * (1.0 - top.alpha)
        if alpha == 0.0:
            return Color.from_rgba_float(0.0, 0.0, 0.0, 0.0)

        def channel(c_top: float, c_back: float) -> float:
            return (c_top * top.alpha + c_back * backdrop.alpha * (1.0 - top.alpha)) / alpha

        return Color.from_rgba_float(
            channel(top.r, backdrop.r),
            channel(top.g, backdrop.g),
            channel(top.b, backdrop.b),
            alpha,
        )

    def mix(self, other: Color, fraction: FractionLike, space: Union[str, type] = "lab") -> Color:
        """
        Interpolate toward other in the given color space.

        Args:
            other: Target color (reached at fraction 1.0)
            fraction: Mix ratio, clamped to [0, 1]
            space: Registry name (e.g. "hsl", "lab") or a ColorSpace type

        Hue channels take the shorter arc; a gray operand adopts the
        other operand's hue.
        """
        from huekit.spaces import mix

        return mix(self, other, fraction, space)
