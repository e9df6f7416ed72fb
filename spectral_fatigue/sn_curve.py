"""
S-N Curve Parameter Estimator
=============================
Basquin S-N curve:  N · S^m = K

  N : cycles to failure
  S : stress amplitude [MPa]
  m : slope (inverse, > 0)
  K : curve constant

Estimation paths:
  1. Two points          m = log10(N2/N1) / log10(S1/S2),  K = N1 · S1^m
  2. Material strengths  (1e3, 0.9·Rm) and (1e6, Se), Se = 0.5·Rm if unknown
                         (Shigley-style high-cycle approximation)
  3. Regression          log10 N = C + B · log10 S  (least squares)
                         m = −B,  K = 10^C

The curve sampler is for plotting/validation only; damage uses (m, K).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Union

import numpy as np

from .errors import DegenerateFit, InsufficientData, InvalidCurveData

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SNCurveParams:
    """Basquin parameters (N · S^m = K)."""
    m: float
    K: float

    def cycles_at(self, stress: float) -> float:
        """Cycles to failure at stress amplitude S."""
        return self.K / stress ** self.m

    def stress_at(self, cycles: float) -> float:
        """Stress amplitude that fails after N cycles."""
        return (self.K / cycles) ** (1.0 / self.m)


class SNPoint(NamedTuple):
    cycles: float
    stress: float


@dataclass(frozen=True)
class MaterialStrength:
    """Static strength data used for the two-point material estimate."""
    Rm: float                    # ultimate tensile strength [MPa]
    Se: Optional[float] = None   # endurance limit at 1e6 cycles [MPa]
    description: str = ''


# Anchor points of the material estimate
N_LOW_CYCLE: float = 1e3
N_ENDURANCE: float = 1e6
LOW_CYCLE_FRACTION: float = 0.9
ENDURANCE_FRACTION: float = 0.5

# Plotting range of the curve sampler
SN_CURVE_MIN_CYCLES: float = 1e2
SN_CURVE_MAX_CYCLES: float = 1e8

# fmt: off
MATERIAL_PRESETS: Dict[str, MaterialStrength] = {
    'Structural Steel': MaterialStrength(Rm=460.0, description='Structural steel (default)'),
}
# fmt: on


# ---------------------------------------------------------------------------
# Estimators
# ---------------------------------------------------------------------------

def _curve_constant(compute, m: float) -> float:
    try:
        K = float(compute())
    except OverflowError:
        K = math.inf
    if not math.isfinite(K) or K <= 0:
        raise InvalidCurveData(
            f"Invalid S-N data: slope m={m:.4g} gives a curve constant K outside float range"
        )
    return K


def calculate_basquin_from_points(N1: float, S1: float, N2: float, S2: float) -> SNCurveParams:
    """
    Basquin parameters through two points of the S-N curve.

    Parameters
    ----------
    N1, S1 : float
        Low-cycle point (higher stress).
    N2, S2 : float
        High-cycle point (lower stress).

    Raises
    ------
    InvalidCurveData
        S1 ≤ S2 or N1 ≥ N2 (stress must fall as cycles grow), or the slope
        is so steep that K exceeds float range.
    """
    if S1 <= S2:
        raise InvalidCurveData(
            f"Invalid S-N data: stress at N1 ({S1}) must be higher than stress at N2 ({S2})"
        )
    if N1 >= N2:
        raise InvalidCurveData(f"Invalid S-N data: N2 ({N2}) must be greater than N1 ({N1})")

    m = float(np.log10(N2 / N1) / np.log10(S1 / S2))
    return SNCurveParams(m=m, K=_curve_constant(lambda: N1 * float(S1) ** m, m))


def calculate_basquin_params(
    ultimate_strength: float,
    endurance_limit: Optional[float] = None,
) -> SNCurveParams:
    """
    Estimate (m, K) from material strengths.

    Points: (1e3, 0.9·Rm) and (1e6, Se). Se defaults to 0.5·Rm when not
    given (or not positive), which is conservative for steels below 1400 MPa.
    """
    S1 = LOW_CYCLE_FRACTION * ultimate_strength
    if endurance_limit is not None and endurance_limit > 0:
        S2 = endurance_limit
    else:
        S2 = ENDURANCE_FRACTION * ultimate_strength
    return calculate_basquin_from_points(N_LOW_CYCLE, S1, N_ENDURANCE, S2)


def _point_values(p: Union[Mapping[str, float], Sequence[float]]):
    if isinstance(p, Mapping):
        return float(p['cycles']), float(p['stress'])
    return float(p[0]), float(p[1])


def calculate_basquin_regression(
    points: Iterable[Union[Mapping[str, float], Sequence[float]]],
) -> SNCurveParams:
    """
    Log-log least-squares fit of N · S^m = K.

    Parameters
    ----------
    points : iterable
        (cycles, stress) pairs or mappings with 'cycles' and 'stress' keys.
        Non-positive points are skipped.

    Raises
    ------
    InsufficientData
        Fewer than 2 points supplied.
    DegenerateFit
        All usable stresses identical in log space (vertical line).
    """
    pts = [_point_values(p) for p in points]
    if len(pts) < 2:
        raise InsufficientData("At least 2 points are required for regression.")

    usable = [(N, S) for N, S in pts if N > 0 and S > 0]
    x = np.log10(np.array([S for _, S in usable], dtype=float))
    y = np.log10(np.array([N for N, _ in usable], dtype=float))
    n = len(usable)   # skipped points do not enter n

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    if n < 2 or np.ptp(x) == 0.0 or denominator == 0.0:
        raise DegenerateFit("Cannot fit line: vertical data alignment (identical stresses).")

    B = (n * sum_xy - sum_x * sum_y) / denominator
    C = (sum_y - B * sum_x) / n
    m = float(-B)
    return SNCurveParams(m=m, K=_curve_constant(lambda: 10.0 ** C, m))


# ---------------------------------------------------------------------------
# Curve sampler
# ---------------------------------------------------------------------------

class SNCurveData:
    """
    Log-spaced (cycles, stress) samples of a Basquin curve.

    Finite and restartable: every iteration recomputes the points lazily.
    """

    def __init__(self, m: float, K: float, points: int = 50,
                 min_cycles: float = SN_CURVE_MIN_CYCLES,
                 max_cycles: float = SN_CURVE_MAX_CYCLES):
        if points < 2:
            raise ValueError(f"points must be at least 2, got {points}")
        self.m = m
        self.K = K
        self.points = int(points)
        self.min_cycles = min_cycles
        self.max_cycles = max_cycles

    def __len__(self) -> int:
        return self.points

    def __iter__(self) -> Iterator[SNPoint]:
        min_log = np.log10(self.min_cycles)
        max_log = np.log10(self.max_cycles)
        step = (max_log - min_log) / (self.points - 1)
        for i in range(self.points):
            N = 10.0 ** (min_log + i * step)
            yield SNPoint(cycles=float(N), stress=float((self.K / N) ** (1.0 / self.m)))

    def to_arrays(self):
        """(cycles, stress) as numpy arrays."""
        pts = list(self)
        return (np.array([p.cycles for p in pts]), np.array([p.stress for p in pts]))


def generate_sn_curve_data(m: float, K: float, points: int = 50) -> SNCurveData:
    """S = (K/N)^(1/m) sampled between N = 1e2 and 1e8."""
    return SNCurveData(m, K, points)


# ---------------------------------------------------------------------------
# Table ingestion / presets
# ---------------------------------------------------------------------------

_TABLE_SPLIT = re.compile(r'[,\t; ]+')


def parse_sn_table(text: str) -> List[SNPoint]:
    """Rows of 'cycles stress'; non-numeric and non-positive rows are skipped."""
    out: List[SNPoint] = []
    for line in text.strip().splitlines():
        parts = [p for p in _TABLE_SPLIT.split(line.strip()) if p]
        if len(parts) < 2:
            continue
        try:
            N = float(parts[0])
            S = float(parts[1])
        except ValueError:
            continue
        if N > 0 and S > 0:
            out.append(SNPoint(N, S))
    return out


def get_material_strength(name: str) -> MaterialStrength:
    if name in MATERIAL_PRESETS:
        return MATERIAL_PRESETS[name]
    key_lower = name.lower().replace(' ', '').replace('-', '')
    for preset_name, preset in MATERIAL_PRESETS.items():
        if preset_name.lower().replace(' ', '').replace('-', '') == key_lower:
            return preset
    raise KeyError(
        f"Unknown material '{name}'. "
        f"Known: {', '.join(sorted(MATERIAL_PRESETS.keys()))}"
    )


def list_material_presets() -> List[str]:
    return list(MATERIAL_PRESETS.keys())
