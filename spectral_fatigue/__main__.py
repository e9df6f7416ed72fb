#!/usr/bin/env python3
"""
Spectral Fatigue CLI Entry Point

Usage:
    python -m spectral_fatigue                                   # Quick reference
    python -m spectral_fatigue analyze psd.txt --rm 460 --duration 1 --unit hours
    python -m spectral_fatigue analyze psd.txt --m 6.4 --K 1.5e20
    python -m spectral_fatigue sn-fit --points 1000 414 1e6 230
    python -m spectral_fatigue sn-fit --table sn_points.txt
    python -m spectral_fatigue curve --rm 460 --out sn.png
    python -m spectral_fatigue materials
"""

from __future__ import annotations

import argparse
import sys

from .damage import TIME_UNITS, calculate_fatigue, to_seconds
from .errors import SpectralFatigueError
from .sn_curve import (
    MATERIAL_PRESETS,
    SNCurveParams,
    calculate_basquin_from_points,
    calculate_basquin_params,
    calculate_basquin_regression,
    generate_sn_curve_data,
    get_material_strength,
    parse_sn_table,
)
from .spectrum import load_psd

QUICK_REFERENCE = """
╔══════════════════════════════════════════════════════════════════════════════╗
║  Spectral Fatigue — CLI Quick Reference                                      ║
╠══════════════════════════════════════════════════════════════════════════════╣
║  🔄 DAMAGE / LIFE (Wirsching-Light)                                          ║
║    python -m spectral_fatigue analyze psd.txt --rm 460 --duration 1 \\        ║
║           --unit hours                                                       ║
║    python -m spectral_fatigue analyze psd.txt --m 6.4 --K 1.5e20             ║
║    python -m spectral_fatigue analyze psd.txt --sn-table sn_points.txt       ║
║                                                                              ║
║  📐 S-N PARAMETERS  (N · S^m = K)                                            ║
║    python -m spectral_fatigue sn-fit --rm 460 [--se 230]                     ║
║    python -m spectral_fatigue sn-fit --points 1000 414 1e6 230               ║
║    python -m spectral_fatigue sn-fit --table sn_points.txt                   ║
║                                                                              ║
║  📊 S-N PLOT                                                                 ║
║    python -m spectral_fatigue curve --rm 460 --out sn.png                    ║
║                                                                              ║
║  PSD file: two columns (Hz, stress²/Hz), tab/semicolon/space/comma.          ║
║  PSD and S-N curve must use the same stress unit (e.g. MPa).                 ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_sn_arguments(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group('S-N curve (pick one source)')
    g.add_argument('--m', type=float, help='Basquin slope m')
    g.add_argument('--K', type=float, help='Basquin constant K (N·S^m = K)')
    g.add_argument('--rm', type=float, help='Ultimate tensile strength Rm [MPa]')
    g.add_argument('--se', type=float, help='Endurance limit Se at 1e6 cycles [MPa] (default 0.5·Rm)')
    g.add_argument('--material', type=str, help='Material preset name (see "materials")')
    g.add_argument('--points', type=float, nargs=4, metavar=('N1', 'S1', 'N2', 'S2'),
                   help='Two S-N points')
    g.add_argument('--sn-table', '--table', dest='sn_table', type=str,
                   help='Text file with "cycles stress" rows (regression)')


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='spectral-fatigue',
        description='Random-vibration fatigue life from a stress PSD (Wirsching-Light)',
    )
    sub = p.add_subparsers(dest='cmd')

    # --- analyze ---
    sa = sub.add_parser('analyze', help='Damage and life from a PSD file')
    sa.add_argument('psd_file', type=str, help='PSD file (frequency, psd)')
    _add_sn_arguments(sa)
    sa.add_argument('--duration', type=float, default=1.0, help='Exposure time (default 1)')
    sa.add_argument('--unit', type=str, choices=list(TIME_UNITS), default='hours',
                    help='Exposure time unit (default hours)')

    # --- sn-fit ---
    sf = sub.add_parser('sn-fit', help='Derive Basquin m, K')
    _add_sn_arguments(sf)

    # --- curve ---
    sc = sub.add_parser('curve', help='Plot the S-N curve')
    _add_sn_arguments(sc)
    sc.add_argument('--n-points', type=int, default=50)
    sc.add_argument('--out', type=str, default='sn_curve.png')

    # --- materials ---
    sub.add_parser('materials', help='List material presets')

    return p


def _resolve_sn(args) -> SNCurveParams:
    sources = [flag for flag, given in (
        ('--m/--K', args.m is not None or args.K is not None),
        ('--points', bool(args.points)),
        ('--sn-table', bool(args.sn_table)),
        ('--rm', args.rm is not None),
        ('--material', bool(args.material)),
    ) if given]
    if len(sources) > 1:
        raise ValueError(f"Give only one S-N source, got: {', '.join(sources)}")
    if args.se is not None and sources and sources[0] not in ('--rm', '--material'):
        raise ValueError("--se only applies to --rm or --material")

    if args.m is not None or args.K is not None:
        if args.m is None or args.K is None:
            raise ValueError("--m and --K must be given together")
        return SNCurveParams(m=args.m, K=args.K)
    if args.points:
        return calculate_basquin_from_points(*args.points)
    if args.sn_table:
        with open(args.sn_table, 'r', encoding='utf-8') as fh:
            return calculate_basquin_regression(parse_sn_table(fh.read()))
    if args.rm is not None:
        return calculate_basquin_params(args.rm, args.se)
    if args.material:
        strength = get_material_strength(args.material)
        se = args.se if args.se is not None else strength.Se
        return calculate_basquin_params(strength.Rm, se)
    raise ValueError("Specify an S-N source: --m/--K, --rm, --material, --points or --sn-table")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_analyze(args):
    sn = _resolve_sn(args)
    spectrum = load_psd(args.psd_file)
    duration = to_seconds(args.duration, args.unit)
    result = calculate_fatigue(spectrum, sn, duration)

    print(f"\n  PSD file        : {args.psd_file} ({len(spectrum)} points)")
    print(f"  Exposure        : {args.duration:g} {args.unit}")
    print(result.summary())


def cmd_sn_fit(args):
    sn = _resolve_sn(args)
    print(f"\n  Basquin S-N curve  N · S^m = K")
    print(f"  {'='*45}")
    print(f"  m               : {sn.m:.4f}")
    print(f"  K               : {sn.K:.4e}")
    print(f"  {'-'*45}")
    for N in (1e3, 1e4, 1e5, 1e6, 1e7):
        print(f"  S({N:.0e})       : {sn.stress_at(N):.1f}")
    print()


def cmd_curve(args):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    sn = _resolve_sn(args)
    cycles, stress = generate_sn_curve_data(sn.m, sn.K, args.n_points).to_arrays()

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(cycles, stress, 'b-', linewidth=2.5)
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('N [cycles]', fontsize=12)
    ax.set_ylabel('S [stress amplitude]', fontsize=12)
    ax.set_title(f'Basquin S-N: m={sn.m:.3f}, K={sn.K:.3e}', fontsize=13, fontweight='bold')
    ax.grid(True, which='both', alpha=0.3)
    plt.tight_layout()
    plt.savefig(args.out, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"  Saved: {args.out}")


def cmd_materials(args):
    print(f"\n  Material presets ({len(MATERIAL_PRESETS)})")
    print(f"  {'='*60}")
    for name, mat in MATERIAL_PRESETS.items():
        se = f"{mat.Se:.1f}" if mat.Se else "0.5·Rm"
        print(f"  {name:<18} Rm={mat.Rm:>7.1f}  Se={se:<7}  {mat.description}")
    print()


COMMANDS = {
    'analyze': cmd_analyze,
    'sn-fit': cmd_sn_fit,
    'curve': cmd_curve,
    'materials': cmd_materials,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        print(QUICK_REFERENCE)
        return 0

    try:
        COMMANDS[args.cmd](args)
    except (SpectralFatigueError, ValueError, KeyError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
