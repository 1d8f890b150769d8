# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color space transfer kernels.

Every color is stored as CIE XYZ (D65). All other spaces are reached
through the chains below:

    sRGB ↔ Linear RGB ↔ XYZ ↔ Lab / Luv / LMS
                     ↕
                   OKLab
    Lab / Luv / OKLab ↔ polar (L, C, H)

References:
- sRGB: IEC 61966-2-1
- CIELAB / CIELUV: CIE 15:2004
- OKLab: https://bottosson.github.io/posts/oklab/

All kernels are pure NumPy and take arrays of shape (..., 3), so a single
color and a batch of colors go through the same code.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Reference white and matrices
# =============================================================================

# CIE D65 reference white, Y normalized to 1
D65_WHITE = np.array([0.950470, 1.0, 1.088830], dtype=np.float64)

# Linear sRGB to XYZ (D65)
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# XYZ to LMS cone responses (Hunt-Pointer-Estévez style, used for
# colorblindness simulation)
_XYZ_TO_LMS = np.array([
    [0.38971, 0.68898, -0.07868],
    [-0.22981, 1.18340, 0.04641],
    [0.0, 0.0, 1.0],
], dtype=np.float64)

_LMS_TO_XYZ = np.linalg.inv(_XYZ_TO_LMS)

# Linear sRGB to OKLab LMS
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# OKLab LMS (cube root) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)

# CIE f(t) breakpoint
_DELTA = 6.0 / 29.0


def _apply(matrix: NDArray[np.float64], values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.einsum('...j,ij->...i', values, matrix)


def _safe_divide(numerator, denominator):
    """Elementwise division that yields 0 where the denominator is 0."""
    zero = denominator == 0
    return np.where(zero, 0.0, numerator / np.where(zero, 1.0, denominator))


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to linear RGB.

    The curve is applied to the magnitude and the sign is kept, so values
    outside [0, 1] stay invertible:
    - For |value| <= 0.04045: value/12.92
    - Otherwise: sign * ((|value| + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    return np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear. No clipping: out-of-gamut values pass through.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    return np.where(
        magnitude > 0.0031308,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055),
        linear * 12.92,
    )


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================


def linear_srgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return _apply(_RGB_TO_XYZ, np.asarray(rgb, dtype=np.float64))


def xyz_to_linear_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    return _apply(_XYZ_TO_RGB, np.asarray(xyz, dtype=np.float64))


def srgb_to_xyz(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB [0,1] to XYZ.

    Full chain: sRGB → Linear RGB → XYZ
    """
    return linear_srgb_to_xyz(srgb_to_linear(srgb))


def xyz_to_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to gamma-encoded sRGB.

    Full chain: XYZ → Linear RGB → sRGB. Values are not clipped.
    """
    return linear_to_srgb(xyz_to_linear_srgb(xyz))


# =============================================================================
# XYZ ↔ CIELAB
# =============================================================================


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _DELTA ** 3,
        np.cbrt(t),
        t / (3.0 * _DELTA ** 2) + 4.0 / 29.0,
    )


def _lab_f_inv(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _DELTA,
        t ** 3,
        3.0 * _DELTA ** 2 * (t - 4.0 / 29.0),
    )


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIELAB relative to D65.

    Args:
        xyz: Array of shape (..., 3) with XYZ values (Y of white = 1)

    Returns:
        Array of shape (..., 3) with Lab values (L in [0, 100])
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB (D65) to XYZ.

    Args:
        lab: Array of shape (..., 3) with Lab values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    return _lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * D65_WHITE


# =============================================================================
# XYZ ↔ CIELUV
# =============================================================================


def _uv_prime(xyz: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    denominator = x + 15.0 * y + 3.0 * z
    return _safe_divide(4.0 * x, denominator), _safe_divide(9.0 * y, denominator)


_WHITE_U, _WHITE_V = (float(c) for c in _uv_prime(D65_WHITE))


def xyz_to_luv(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIELUV relative to D65.

    A zero chromaticity denominator (black) maps u' and v' to 0.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    L = 116.0 * _lab_f(xyz[..., 1] / D65_WHITE[1]) - 16.0
    u_prime, v_prime = _uv_prime(xyz)

    u = 13.0 * L * (u_prime - _WHITE_U)
    v = 13.0 * L * (v_prime - _WHITE_V)
    return np.stack([L, u, v], axis=-1)


def luv_to_xyz(luv: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELUV (D65) to XYZ.

    L = 0 is black; a zero v' gives X = Z = 0.
    """
    luv = np.asarray(luv, dtype=np.float64)
    L, u, v = luv[..., 0], luv[..., 1], luv[..., 2]

    u_prime = _safe_divide(u, 13.0 * L) + _WHITE_U
    v_prime = _safe_divide(v, 13.0 * L) + _WHITE_V

    y = D65_WHITE[1] * _lab_f_inv((L + 16.0) / 116.0)
    x = y * _safe_divide(9.0 * u_prime, 4.0 * v_prime)
    z = y * _safe_divide(12.0 - 3.0 * u_prime - 20.0 * v_prime, 4.0 * v_prime)

    xyz = np.stack([x, y, z], axis=-1)
    return np.where(np.asarray(L == 0)[..., np.newaxis], 0.0, xyz)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lms = _apply(_M1, np.asarray(rgb, dtype=np.float64))
    # Sign-preserving cube root for out-of-gamut colors
    return _apply(_M2, np.cbrt(lms))


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lms_cbrt = _apply(_M2_INV, np.asarray(lab, dtype=np.float64))
    return _apply(_M1_INV, lms_cbrt ** 3)


def xyz_to_oklab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    return linear_rgb_to_oklab(xyz_to_linear_srgb(xyz))


def oklab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    return linear_srgb_to_xyz(oklab_to_linear_rgb(lab))


# =============================================================================
# XYZ ↔ LMS
# =============================================================================


def xyz_to_lms(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    return _apply(_XYZ_TO_LMS, np.asarray(xyz, dtype=np.float64))


def lms_to_xyz(lms: NDArray[np.float64]) -> NDArray[np.float64]:
    return _apply(_LMS_TO_XYZ, np.asarray(lms, dtype=np.float64))


# =============================================================================
# Rectangular ↔ polar (Lab → LCh, Luv → LChuv, OKLab → OKLCh)
# =============================================================================


def rect_to_polar(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert (L, a, b) to (L, C, H).

    H is in degrees [0, 360).
    """
    values = np.asarray(values, dtype=np.float64)
    # + 0.0 turns -0.0 into 0.0 so achromatic colors get hue 0, not 180
    L, a, b = values[..., 0], values[..., 1] + 0.0, values[..., 2] + 0.0

    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # Tiny negative angles wrap to exactly 360.0 in floating point
    H = np.where(H >= 360.0, H - 360.0, H)
    return np.stack([L, C, H], axis=-1)


def polar_to_rect(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert (L, C, H) to (L, a, b).

    Negative chroma is treated as 0.
    """
    values = np.asarray(values, dtype=np.float64)
    L = values[..., 0]
    C = np.maximum(values[..., 1], 0.0)
    H_rad = np.radians(values[..., 2])
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)
