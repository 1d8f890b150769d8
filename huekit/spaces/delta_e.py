# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (ΔE) in CIELAB.

The matrix functions compare one Lab vector against every row of an
(N, 3) Lab matrix, which is how nearest-color lookups are done in bulk.

Reference thresholds (CIE76):
- ΔE < ~2.3: not noticeable
- ΔE ≈ 5: clearly different at a glance
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from huekit.spaces.lab import Lab


def _vector(lab: Lab) -> NDArray[np.float64]:
    return np.array([lab.l, lab.a, lab.b], dtype=np.float64)


def delta_e_cie76_matrix(
    lab_vector: NDArray[np.float64],
    lab_matrix: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Euclidean distance from lab_vector to each row of lab_matrix."""
    lab_matrix = np.atleast_2d(np.asarray(lab_matrix, dtype=np.float64))
    return np.sqrt(np.sum((np.asarray(lab_vector) - lab_matrix) ** 2, axis=1))


def delta_e_ciede2000_matrix(
    lab_vector: NDArray[np.float64],
    lab_matrix: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    CIEDE2000 distance from lab_vector to each row of lab_matrix.

    Follows Sharma, Wu & Dalal, "The CIEDE2000 Color-Difference Formula:
    Implementation Notes, Supplementary Test Data, and Mathematical
    Observations" (2005), with kL = kC = kH = 1.
    """
    lab_matrix = np.atleast_2d(np.asarray(lab_matrix, dtype=np.float64))
    L1, a1, b1 = (float(v) for v in lab_vector)
    L2, a2, b2 = lab_matrix[:, 0], lab_matrix[:, 1], lab_matrix[:, 2]

    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    avg_C = (C1 + C2) / 2.0
    G = 0.5 * (1.0 - np.sqrt(avg_C ** 7 / (avg_C ** 7 + 25.0 ** 7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    chroma_product = C1p * C2p
    achromatic = chroma_product == 0.0

    dhp = h2p - h1p
    dhp = np.where(dhp > 180.0, dhp - 360.0, dhp)
    dhp = np.where(dhp < -180.0, dhp + 360.0, dhp)
    dhp = np.where(achromatic, 0.0, dhp)

    delta_Lp = L2 - L1
    delta_Cp = C2p - C1p
    delta_Hp = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dhp) / 2.0)

    avg_Lp = (L1 + L2) / 2.0
    avg_Cp = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    avg_Hp = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    avg_Hp = np.where(achromatic, h_sum, avg_Hp)

    T = (
        1.0
        - 0.17 * np.cos(np.radians(avg_Hp - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * avg_Hp))
        + 0.32 * np.cos(np.radians(3.0 * avg_Hp + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * avg_Hp - 63.0))
    )

    delta_theta = 30.0 * np.exp(-(((avg_Hp - 275.0) / 25.0) ** 2))
    R_C = 2.0 * np.sqrt(avg_Cp ** 7 / (avg_Cp ** 7 + 25.0 ** 7))
    S_L = 1.0 + (0.015 * (avg_Lp - 50.0) ** 2) / np.sqrt(20.0 + (avg_Lp - 50.0) ** 2)
    S_C = 1.0 + 0.045 * avg_Cp
    S_H = 1.0 + 0.015 * avg_Cp * T
    R_T = -np.sin(np.radians(2.0 * delta_theta)) * R_C

    term_L = delta_Lp / S_L
    term_C = delta_Cp / S_C
    term_H = delta_Hp / S_H
    return np.sqrt(term_L ** 2 + term_C ** 2 + term_H ** 2 + R_T * term_C * term_H)


def cie76(lab1: Lab, lab2: Lab) -> float:
    """CIE76 ΔE: Euclidean distance in Lab."""
    return float(delta_e_cie76_matrix(_vector(lab1), _vector(lab2))[0])


def ciede2000(lab1: Lab, lab2: Lab) -> float:
    """CIEDE2000 ΔE."""
    return float(delta_e_ciede2000_matrix(_vector(lab1), _vector(lab2))[0])
