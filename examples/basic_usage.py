#!/usr/bin/env python3
"""
Spectral Fatigue Basic Usage Examples
=====================================

Random-vibration fatigue life from a stress PSD, step by step.
"""

import numpy as np

from spectral_fatigue import (
    calculate_basquin_from_points,
    calculate_basquin_params,
    calculate_basquin_regression,
    calculate_fatigue,
    calculate_moment,
    format_life,
    generate_sn_curve_data,
    to_seconds,
)

# =============================================================================
# Example 1: Spectral moments
# =============================================================================
print("=" * 70)
print("Example 1: Spectral Moments")
print("=" * 70)

triangle = [(0.0, 0.0), (10.0, 100.0), (20.0, 0.0)]   # Hz, MPa²/Hz
for n in range(5):
    print(f"  m{n} = {calculate_moment(triangle, n):.4e}")

# =============================================================================
# Example 2: S-N curve parameters
# =============================================================================
print("\n" + "=" * 70)
print("Example 2: S-N Curve (N · S^m = K)")
print("=" * 70)

sn_points = calculate_basquin_from_points(1000, 414, 1e6, 230)
print(f"\nTwo points (1e3, 414) / (1e6, 230):")
print(f"  m = {sn_points.m:.4f}, K = {sn_points.K:.4e}")

sn_rm = calculate_basquin_params(460)
print(f"\nFrom Rm = 460 MPa (Se = 0.5·Rm):")
print(f"  m = {sn_rm.m:.4f}, K = {sn_rm.K:.4e}")

test_data = [(1.2e3, 410), (9.5e3, 340), (1.1e5, 285), (8.7e5, 236), (2.0e6, 221)]
sn_reg = calculate_basquin_regression(test_data)
print(f"\nRegression over {len(test_data)} test points:")
print(f"  m = {sn_reg.m:.4f}, K = {sn_reg.K:.4e}")

print("\nSampled curve (every 10th point):")
for i, p in enumerate(generate_sn_curve_data(sn_reg.m, sn_reg.K)):
    if i % 10 == 0:
        print(f"  N = {p.cycles:10.3e}   S = {p.stress:7.1f} MPa")

# =============================================================================
# Example 3: Damage and life (band-limited white noise)
# =============================================================================
print("\n" + "=" * 70)
print("Example 3: Wirsching-Light Damage")
print("=" * 70)

freqs = np.linspace(20.0, 500.0, 49)
psd = [(f, 4.0) for f in freqs]          # 4 MPa²/Hz flat
T = to_seconds(1, 'hours')

result = calculate_fatigue(psd, sn_rm, T)
print(result.summary())

print("Life vs PSD level:")
for level in [1.0, 4.0, 16.0, 64.0]:
    r = calculate_fatigue([(f, level) for f in freqs], sn_rm, T)
    print(f"  G = {level:5.1f} MPa²/Hz: σ_rms = {r.rms_stress:6.1f} MPa, "
          f"life = {format_life(r.wirsching_life_seconds)}")
