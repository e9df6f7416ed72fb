"""
Gamma function (Lanczos approximation, g = 7, 8 terms).

Used by the narrow-band damage term Γ(1 + m/2); log_gamma keeps that term
finite for steep S-N slopes. For z < 0.5 the reflection
formula Γ(z) = π / (sin(πz)·Γ(1−z)) is applied; 1 − z ≥ 0.5 so it recurses
exactly once.
"""

from __future__ import annotations

import math
from typing import Tuple

LANCZOS_G: int = 7

# fmt: off
LANCZOS_COEFFS: Tuple[float, ...] = (
    676.5203681218851,     -1259.1392167224028,   771.32342877765313,
    -176.61502916214059,    12.507343278686905,   -0.13857109526572012,
    9.9843695780195716e-6,  1.5056327351493116e-7,
)
# fmt: on

_LANCZOS_C0: float = 0.99999999999980993


def gamma(z: float) -> float:
    """Γ(z) for real z (poles at non-positive integers are not handled)."""
    if z < 0.5:
        return math.pi / (math.sin(math.pi * z) * gamma(1.0 - z))

    z -= 1.0
    x = _LANCZOS_C0
    for i, p in enumerate(LANCZOS_COEFFS):
        x += p / (z + i + 1)
    t = z + LANCZOS_G + 0.5
    return math.sqrt(2 * math.pi) * t ** (z + 0.5) * math.exp(-t) * x


def log_gamma(z: float) -> float:
    """ln Γ(z) for z ≥ 0.5, same Lanczos series without the overflowing power."""
    if z < 0.5:
        raise ValueError(f"log_gamma needs z >= 0.5, got {z}")

    z -= 1.0
    x = _LANCZOS_C0
    for i, p in enumerate(LANCZOS_COEFFS):
        x += p / (z + i + 1)
    t = z + LANCZOS_G + 0.5
    return 0.5 * math.log(2 * math.pi) + (z + 0.5) * math.log(t) - t + math.log(x)
