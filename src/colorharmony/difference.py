from __future__ import annotations

"""Perceptual color difference (CIEDE2000).

The functions here operate on CIE L*a*b* triples and are vectorized with
NumPy: either argument may be a single ``(3,)`` triple or an ``(N, 3)``
array, and the result broadcasts accordingly. The distinctness threshold
used by the palette service is expressed on this ΔE00 scale.

Reference: Sharma, G., Wu, W., & Dalal, E. N. (2005), "The CIEDE2000
color-difference formula: implementation notes, supplementary test data,
and mathematical observations".
"""

from typing import Union

import numpy as np

ArrayLike = Union[np.ndarray, tuple, list]

_POW25_7 = 25.0**7


def delta_e_2000(lab1: ArrayLike, lab2: ArrayLike) -> Union[float, np.ndarray]:
    """CIEDE2000 difference between Lab colors.

    Parameters
    ----------
    lab1, lab2:
        Lab triples with shape ``(3,)`` or ``(N, 3)``; shapes must broadcast.

    Returns
    -------
    float or numpy.ndarray
        A Python float when both inputs are single triples, otherwise an
        array of differences with the broadcast shape (minus the last axis).
    """
    c1 = np.asarray(lab1, dtype=np.float64)
    c2 = np.asarray(lab2, dtype=np.float64)
    L1, a1, b1 = c1[..., 0], c1[..., 1], c1[..., 2]
    L2, a2, b2 = c2[..., 0], c2[..., 1], c2[..., 2]

    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + _POW25_7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)

    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    chroma_prod = C1p * C2p
    achromatic = chroma_prod == 0.0

    dLp = L2 - L1
    dCp = C2p - C1p

    dhp = h2p - h1p
    dhp = np.where(dhp > 180.0, dhp - 360.0, np.where(dhp < -180.0, dhp + 360.0, dhp))
    dhp = np.where(achromatic, 0.0, dhp)
    dHp = 2.0 * np.sqrt(chroma_prod) * np.sin(np.radians(dhp) / 2.0)

    L_bar = (L1 + L2) / 2.0
    C_bar_p = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.where(
        achromatic,
        h_sum,
        np.where(
            np.abs(h1p - h2p) <= 180.0,
            h_sum / 2.0,
            np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
        ),
    )

    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )

    L50_sq = (L_bar - 50.0) ** 2
    S_L = 1.0 + (0.015 * L50_sq) / np.sqrt(20.0 + L50_sq)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T

    C_bar_p7 = C_bar_p**7
    R_C = 2.0 * np.sqrt(C_bar_p7 / (C_bar_p7 + _POW25_7))
    d_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    R_T = -R_C * np.sin(np.radians(2.0 * d_theta))

    tL = dLp / S_L
    tC = dCp / S_C
    tH = dHp / S_H
    dE = np.sqrt(np.maximum(0.0, tL * tL + tC * tC + tH * tH + R_T * tC * tH))

    if dE.ndim == 0:
        return float(dE)
    return dE


def delta_e_matrix(labs: ArrayLike) -> np.ndarray:
    """Pairwise CIEDE2000 matrix for an ``(N, 3)`` array of Lab colors."""
    arr = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    if arr.shape[0] == 0:
        return np.zeros((0, 0), dtype=np.float64)
    return np.asarray(delta_e_2000(arr[:, None, :], arr[None, :, :]))


__all__ = ["delta_e_2000", "delta_e_matrix"]
