"""
Fatigue Damage Calculator (Wirsching & Light)
=============================================
Frequency-domain fatigue damage of a stationary Gaussian stress process.

Model:
  σ_rms = √m0
  ν0    = (1/2π) · √(m2/m0)          expected zero up-crossing rate [1/s]
  E[P]  = (1/2π) · √(m4/m2)          expected peak rate [1/s]
  γ     = ν0 / E[P]                  irregularity factor (1 = narrow band)
  ε     = √(1 − γ²)                  spectral width (0 = narrow band)

  Narrow band (Rayleigh peaks):
    D_NB = (ν0·T / K) · (√2)^m · Γ(1 + m/2) · σ_rms^m

  Wirsching-Light correction:
    a(m) = 0.926 − 0.033·m
    b(m) = 1.587·m − 2.323
    λ    = a + (1 − a)·(1 − ε)^b
    D_W  = λ · D_NB

  Life:
    L = T / D   [s]   (INFINITE_LIFE when D = 0)

The PSD and the S-N curve must use the same stress unit (e.g. MPa²/Hz, MPa).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidCurveData, InvalidSpectralData
from .gamma import log_gamma
from .sn_curve import SNCurveParams
from .spectrum import SpectrumLike, spectral_moments

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

INFINITE_LIFE: float = math.inf

# Wirsching-Light empirical coefficients
WL_A0: float = 0.926
WL_A1: float = 0.033
WL_B0: float = 2.323
WL_B1: float = 1.587

TIME_UNITS: Dict[str, float] = {
    'seconds': 1.0,
    'minutes': 60.0,
    'hours': 3600.0,
}

SECONDS_PER_HOUR: float = 3600.0
THOUSAND_YEARS_SECONDS: float = 3.154e10


def is_infinite_life(life_seconds: float) -> bool:
    return math.isinf(life_seconds)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FatigueResult:
    """Outcome of one spectral fatigue calculation."""
    m0: float
    m1: float
    m2: float
    m3: float
    m4: float
    rms_stress: float
    expected_zero_crossings: float   # ν0 [1/s]
    expected_peaks: float            # E[P] [1/s]
    irregularity_factor: float       # γ
    spectral_width: float            # ε
    narrow_band_damage: float
    wirsching_damage: float
    narrow_band_life_seconds: float
    wirsching_life_seconds: float
    duration_seconds: float
    sn: SNCurveParams

    @property
    def wirsching_factor(self) -> float:
        """λ = D_W / D_NB (also defined when the damage is zero)."""
        return wirsching_correction(self.sn.m, self.spectral_width)

    @property
    def narrow_band_life_hours(self) -> float:
        return self.narrow_band_life_seconds / SECONDS_PER_HOUR

    @property
    def wirsching_life_hours(self) -> float:
        return self.wirsching_life_seconds / SECONDS_PER_HOUR

    def summary(self) -> str:
        return f"""
{'='*60}
Spectral Fatigue (Wirsching-Light)
{'='*60}
  [S-N]   N · S^m = K
    m          = {self.sn.m:.4f}
    K          = {self.sn.K:.4e}
    T          = {self.duration_seconds:.1f} s

  [Spectral moments]
    m0         = {self.m0:.4e}
    m1         = {self.m1:.4e}
    m2         = {self.m2:.4e}
    m3         = {self.m3:.4e}
    m4         = {self.m4:.4e}

  [Statistics]
    σ_rms      = {self.rms_stress:.4f}
    ν0         = {self.expected_zero_crossings:.4f} Hz
    E[P]       = {self.expected_peaks:.4f} Hz
    γ          = {self.irregularity_factor:.4f}
    ε          = {self.spectral_width:.4f}
    λ          = {self.wirsching_factor:.4f}

  [Damage / Life]
    D_NB       = {self.narrow_band_damage:.4e}   life: {format_life(self.narrow_band_life_seconds)}
    D_W        = {self.wirsching_damage:.4e}   life: {format_life(self.wirsching_life_seconds)}
{'='*60}
"""


# ---------------------------------------------------------------------------
# Core functions
# ---------------------------------------------------------------------------

def wirsching_correction(m: float, spectral_width: float) -> float:
    """
    λ(m, ε) = a + (1 − a)·(1 − ε)^b.

    At ε = 1 the limit is a for b > 0 (m > 1.464) and 1 for b = 0. For
    b < 0 the factor diverges as ε → 1; math.inf is returned at ε = 1 and
    wherever the power overflows.
    """
    a = WL_A0 - WL_A1 * m
    b = WL_B1 * m - WL_B0
    base = max(0.0, 1.0 - spectral_width)
    if base == 0.0:
        if b > 0:
            return a
        if b == 0:
            return 1.0
        return math.inf
    try:
        return a + (1.0 - a) * base ** b
    except OverflowError:
        return math.inf


def narrow_band_damage(
    rms_stress: float,
    zero_crossing_rate: float,
    duration_seconds: float,
    sn: SNCurveParams,
) -> float:
    """
    Rayleigh-based damage D_NB over the exposure time.

    Evaluated in log space so steep slopes do not overflow; a damage beyond
    float range is returned as math.inf (life 0).
    """
    cycles = zero_crossing_rate * duration_seconds
    if cycles <= 0.0 or rms_stress <= 0.0:
        return 0.0
    log_damage = (
        math.log(cycles) - math.log(sn.K)
        + sn.m * math.log(math.sqrt(2.0) * rms_stress)
        + log_gamma(1.0 + sn.m / 2.0)
    )
    try:
        return math.exp(log_damage)
    except OverflowError:
        return math.inf


def life_from_damage(duration_seconds: float, damage: float) -> float:
    """T / D, or INFINITE_LIFE when D is zero or the quotient overflows."""
    if damage <= 0.0:
        return INFINITE_LIFE
    life = duration_seconds / damage
    if not math.isfinite(life):
        return INFINITE_LIFE
    return life


def calculate_fatigue(
    spectrum: SpectrumLike,
    sn: SNCurveParams,
    duration_seconds: float,
) -> FatigueResult:
    """
    Narrow-band and Wirsching-corrected damage and life.

    Parameters
    ----------
    spectrum : iterable
        (frequency [Hz], psd [stress²/Hz]) samples, any order.
    sn : SNCurveParams
        Basquin parameters, m > 0 and K > 0.
    duration_seconds : float
        Exposure time T [s], T ≥ 0.

    Returns
    -------
    FatigueResult

    Raises
    ------
    InvalidSpectralData
        m0, m2 or m4 is not positive.
    InvalidCurveData
        m or K is not positive, or K is not finite.
    """
    if sn.m <= 0 or sn.K <= 0 or not math.isfinite(sn.K):
        raise InvalidCurveData(f"S-N parameters must be positive, got m={sn.m}, K={sn.K}")
    if duration_seconds < 0:
        raise ValueError(f"duration must be non-negative, got {duration_seconds}")

    mom = spectral_moments(spectrum)
    if mom.m0 <= 0 or mom.m2 <= 0 or mom.m4 <= 0:
        raise InvalidSpectralData(
            "Invalid spectral data: moments are zero or negative "
            f"(m0={mom.m0:.3e}, m2={mom.m2:.3e}, m4={mom.m4:.3e})"
        )

    rms_stress = math.sqrt(mom.m0)
    nu0 = (1.0 / (2.0 * math.pi)) * math.sqrt(mom.m2 / mom.m0)
    peaks = (1.0 / (2.0 * math.pi)) * math.sqrt(mom.m4 / mom.m2)

    irregularity = nu0 / peaks
    # round-off can push γ marginally above 1
    spectral_width = math.sqrt(max(0.0, 1.0 - irregularity ** 2))

    d_nb = narrow_band_damage(rms_stress, nu0, duration_seconds, sn)
    d_w = d_nb * wirsching_correction(sn.m, spectral_width)

    return FatigueResult(
        m0=mom.m0,
        m1=mom.m1,
        m2=mom.m2,
        m3=mom.m3,
        m4=mom.m4,
        rms_stress=rms_stress,
        expected_zero_crossings=nu0,
        expected_peaks=peaks,
        irregularity_factor=irregularity,
        spectral_width=spectral_width,
        narrow_band_damage=d_nb,
        wirsching_damage=d_w,
        narrow_band_life_seconds=life_from_damage(duration_seconds, d_nb),
        wirsching_life_seconds=life_from_damage(duration_seconds, d_w),
        duration_seconds=duration_seconds,
        sn=sn,
    )


# ---------------------------------------------------------------------------
# Units / formatting
# ---------------------------------------------------------------------------

def to_seconds(value: float, unit: str = 'seconds') -> float:
    """Exposure time in seconds ('seconds', 'minutes' or 'hours')."""
    try:
        return value * TIME_UNITS[unit]
    except KeyError:
        raise ValueError(
            f"Unknown time unit '{unit}'. Known: {', '.join(TIME_UNITS)}"
        ) from None


def format_life(seconds: float) -> str:
    """Human-readable life, matching the report tables."""
    if is_infinite_life(seconds):
        return "Infinite"
    if seconds > THOUSAND_YEARS_SECONDS:
        return "> 1000 Years"
    if seconds < 60:
        return f"{seconds:.1f} sec"
    if seconds < 3600:
        return f"{int(seconds // 60)}m {int(seconds % 60)}s"
    if seconds < 86400 * 3:
        return f"{int(seconds // 3600)}h {int((seconds % 3600) // 60)}m"
    hours = f"{seconds / SECONDS_PER_HOUR:,.1f}"
    if hours.endswith(".0"):
        hours = hours[:-2]
    return f"{hours} Hours"
