"""
Spectral Moment Engine
======================
PSD ingestion and spectral moments of a one-sided stress PSD.

Model:
  m_n = ∫ f^n · G(f) df

  approximated by the composite trapezoid rule over frequency-sorted samples:

  m_n ≈ Σ 0.5 · (f_i^n·G_i + f_{i+1}^n·G_{i+1}) · (f_{i+1} − f_i)

  m0 = variance of the stress process
  m2 → zero-crossing rate,  m4 → peak rate

Ingestion:
  Delimited text (tab / semicolon / whitespace), optional header lines,
  decimal commas accepted. Negative PSD values (typical of an unstable
  harmonic solution in the FE solver) are clamped to 0 here, so the
  moment engine integrates whatever it is given.
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import InsufficientData, NegativePSDWarning

# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SpectrumSample:
    """One PSD sample."""
    frequency: float   # [Hz]
    psd: float         # [stress²/Hz]


@dataclass(frozen=True)
class SpectralMoments:
    """Spectral moments m0..m4 of a PSD curve."""
    m0: float
    m1: float
    m2: float
    m3: float
    m4: float

    def as_tuple(self) -> Tuple[float, float, float, float, float]:
        return (self.m0, self.m1, self.m2, self.m3, self.m4)


SpectrumLike = Iterable[Union[SpectrumSample, Sequence[float]]]

MOMENT_ORDERS: Tuple[int, ...] = (0, 1, 2, 3, 4)


# ---------------------------------------------------------------------------
# Moments
# ---------------------------------------------------------------------------

def normalize_spectrum(spectrum: SpectrumLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return sorted copies of the frequency and PSD columns.

    Samples are ordered by frequency, ties by PSD, so that any permutation
    of the same samples yields identical arrays. The input is not modified.
    """
    freqs: List[float] = []
    psds: List[float] = []
    for sample in spectrum:
        if isinstance(sample, SpectrumSample):
            f, g = sample.frequency, sample.psd
        else:
            f, g = sample[0], sample[1]
        freqs.append(float(f))
        psds.append(float(g))

    f_arr = np.asarray(freqs, dtype=float)
    g_arr = np.asarray(psds, dtype=float)
    order = np.lexsort((g_arr, f_arr))
    return f_arr[order], g_arr[order]


def _trapezoid_moment(f: np.ndarray, g: np.ndarray, n: int) -> float:
    if f.size < 2:
        return 0.0
    y = np.power(f, n) * g
    return float(np.sum(0.5 * (y[:-1] + y[1:]) * np.diff(f)))


def calculate_moment(spectrum: SpectrumLike, n: int) -> float:
    """
    n-th spectral moment by the trapezoid rule.

    Parameters
    ----------
    spectrum : iterable
        SpectrumSample objects or (frequency, psd) pairs, in any order.
    n : int
        Moment order (n ≥ 0).

    Returns
    -------
    float
        m_n. 0.0 when fewer than 2 samples are given.
    """
    if n < 0:
        raise ValueError(f"moment order must be non-negative, got {n}")
    f, g = normalize_spectrum(spectrum)
    return _trapezoid_moment(f, g, n)


def spectral_moments(spectrum: SpectrumLike) -> SpectralMoments:
    """m0..m4 computed from one sorted copy of the spectrum."""
    f, g = normalize_spectrum(spectrum)
    return SpectralMoments(*(_trapezoid_moment(f, g, n) for n in MOMENT_ORDERS))


# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------

_HEADER_RE = re.compile(r'^[a-zA-Z]')
_SCI_RE = re.compile(r'^[eE]')
_PRIMARY_SPLIT = re.compile(r'[\t;]+')
_FALLBACK_SPLIT = re.compile(r'\s+')
_COMMA_SPLIT = re.compile(r',')


def _to_float(field: str) -> float:
    return float(field.strip().replace(',', '.'))


def parse_psd_text(text: str) -> List[SpectrumSample]:
    """
    Parse delimited (frequency, psd) text into samples.

    Header lines (starting with a letter other than e/E) and blank lines are
    skipped, as are rows whose first two fields are not numbers. Negative PSD
    values are clamped to zero and reported once via NegativePSDWarning.

    Raises
    ------
    InsufficientData
        Fewer than 2 valid rows.
    """
    samples: List[SpectrumSample] = []
    negative_count = 0

    for raw in text.strip().splitlines():
        line = raw.strip()
        if not line:
            continue
        if _HEADER_RE.match(line) and not _SCI_RE.match(line):
            continue

        parts = [p for p in _PRIMARY_SPLIT.split(line) if p.strip()]
        if len(parts) < 2:
            parts = [p for p in _FALLBACK_SPLIT.split(line) if p.strip()]
        if len(parts) < 2:
            # plain CSV: commas are separators, not decimal marks
            parts = [p for p in _COMMA_SPLIT.split(line) if p.strip()]
        if len(parts) < 2:
            continue

        try:
            freq = _to_float(parts[0])
            psd = _to_float(parts[1])
        except ValueError:
            continue
        if np.isnan(freq) or np.isnan(psd):
            continue

        if psd < 0:
            psd = 0.0
            negative_count += 1
        samples.append(SpectrumSample(freq, psd))

    if len(samples) < 2:
        raise InsufficientData(
            f"Insufficient valid PSD data points: found {len(samples)}, need at least 2"
        )

    if negative_count > 0:
        warnings.warn(
            f"Detected {negative_count} negative PSD values (clamped to 0). "
            "This usually indicates an unstable harmonic/random-vibration solution.",
            NegativePSDWarning,
            stacklevel=2,
        )

    return samples


def load_psd(path) -> List[SpectrumSample]:
    """Read a delimited PSD file (see parse_psd_text)."""
    with open(path, 'r', encoding='utf-8', errors='replace') as fh:
        return parse_psd_text(fh.read())
