"""
Error taxonomy for spectral fatigue calculations.

All errors are ValueError subclasses: bad numeric input is a value problem,
and callers that already catch ValueError keep working.
"""

from __future__ import annotations


class SpectralFatigueError(ValueError):
    """Base class for all spectral_fatigue failures."""


class InvalidSpectralData(SpectralFatigueError):
    """A required spectral moment (m0, m2 or m4) is zero or negative."""


class InvalidCurveData(SpectralFatigueError):
    """S-N input that cannot describe a decreasing Basquin curve."""


class InsufficientData(SpectralFatigueError):
    """Fewer data points than the operation needs."""


class DegenerateFit(SpectralFatigueError):
    """Singular least-squares system (all stresses identical in log space)."""


class NegativePSDWarning(UserWarning):
    """Negative PSD values were clamped to zero during ingestion."""
