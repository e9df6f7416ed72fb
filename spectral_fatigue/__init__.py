"""
Spectral Fatigue Core Library
=============================
Fatigue life under random vibration from a one-sided stress PSD.

Modules:
    - spectrum: PSD ingestion + spectral moments (trapezoid rule)
    - gamma: Lanczos Gamma function
    - sn_curve: Basquin S-N parameters (two-point / material / regression)
    - damage: Narrow-band + Wirsching-Light damage and life
    - errors: error taxonomy

Example:
    >>> from spectral_fatigue import calculate_fatigue, calculate_basquin_params
    >>> sn = calculate_basquin_params(460)            # Rm = 460 MPa
    >>> psd = [(0, 0), (10, 100), (20, 0)]             # Hz, MPa²/Hz
    >>> result = calculate_fatigue(psd, sn, 3600)      # 1 hour
    >>> print(result.summary())

    >>> from spectral_fatigue import calculate_basquin_regression
    >>> sn = calculate_basquin_regression([(1e3, 414), (1e5, 300), (1e6, 230)])
"""

# ==============================================================================
# Errors
# ==============================================================================
from .errors import (
    SpectralFatigueError,
    InvalidSpectralData,
    InvalidCurveData,
    InsufficientData,
    DegenerateFit,
    NegativePSDWarning,
)

# ==============================================================================
# Spectral Moment Engine
# ==============================================================================
from .spectrum import (
    SpectrumSample,
    SpectralMoments,
    calculate_moment,
    spectral_moments,
    normalize_spectrum,
    parse_psd_text,
    load_psd,
)

# ==============================================================================
# Gamma
# ==============================================================================
from .gamma import gamma, log_gamma

# ==============================================================================
# S-N Curve
# ==============================================================================
from .sn_curve import (
    SNCurveParams,
    SNPoint,
    SNCurveData,
    MaterialStrength,
    MATERIAL_PRESETS,
    calculate_basquin_from_points,
    calculate_basquin_params,
    calculate_basquin_regression,
    generate_sn_curve_data,
    parse_sn_table,
    get_material_strength,
    list_material_presets,
)

# ==============================================================================
# Damage
# ==============================================================================
from .damage import (
    FatigueResult,
    INFINITE_LIFE,
    calculate_fatigue,
    narrow_band_damage,
    wirsching_correction,
    life_from_damage,
    is_infinite_life,
    to_seconds,
    format_life,
)

# ==============================================================================
# Package Metadata
# ==============================================================================
__version__ = "1.0.0"

__all__ = [
    # === Errors ===
    "SpectralFatigueError",
    "InvalidSpectralData",
    "InvalidCurveData",
    "InsufficientData",
    "DegenerateFit",
    "NegativePSDWarning",

    # === Spectrum ===
    "SpectrumSample",
    "SpectralMoments",
    "calculate_moment",
    "spectral_moments",
    "normalize_spectrum",
    "parse_psd_text",
    "load_psd",

    # === Gamma ===
    "gamma",
    "log_gamma",

    # === S-N Curve ===
    "SNCurveParams",
    "SNPoint",
    "SNCurveData",
    "MaterialStrength",
    "MATERIAL_PRESETS",
    "calculate_basquin_from_points",
    "calculate_basquin_params",
    "calculate_basquin_regression",
    "generate_sn_curve_data",
    "parse_sn_table",
    "get_material_strength",
    "list_material_presets",

    # === Damage ===
    "FatigueResult",
    "INFINITE_LIFE",
    "calculate_fatigue",
    "narrow_band_damage",
    "wirsching_correction",
    "life_from_damage",
    "is_infinite_life",
    "to_seconds",
    "format_life",

    # === Info ===
    "info",
]


# ==============================================================================
# Quick Reference
# ==============================================================================
def info():
    """Print library overview."""
    print(f"""
╔══════════════════════════════════════════════════════════════════════╗
║  Spectral Fatigue Core Library v{__version__}                                ║
╠══════════════════════════════════════════════════════════════════════╣
║                                                                      ║
║  SPECTRAL MOMENTS                                                    ║
║    m_n = ∫ f^n G(f) df   (trapezoid rule, sorted copy)               ║
║    >>> calculate_moment([(0, 0), (10, 100), (20, 0)], 0)  # 1000     ║
║                                                                      ║
║  S-N CURVE  (N · S^m = K)                                            ║
║    >>> calculate_basquin_from_points(1e3, 414, 1e6, 230)             ║
║    >>> calculate_basquin_params(460)          # Se = 0.5 Rm          ║
║    >>> calculate_basquin_regression(points)   # log-log LSQ          ║
║                                                                      ║
║  DAMAGE (Wirsching-Light)                                            ║
║    D_NB = (ν0 T / K) (√2)^m Γ(1+m/2) σ_rms^m                         ║
║    λ    = a + (1-a)(1-ε)^b,  a = 0.926-0.033m,  b = 1.587m-2.323     ║
║    D_W  = λ D_NB,   Life = T / D                                     ║
║    >>> calculate_fatigue(psd, sn, duration_seconds)                  ║
║                                                                      ║
╚══════════════════════════════════════════════════════════════════════╝
    """)
