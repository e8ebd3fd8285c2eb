#!/usr/bin/env python3
"""
Evaluate every fresh snow density method over a forcing record.
Prints a per-method summary for snowfall steps and saves a comparison plot.
"""

import argparse
import logging
from datetime import datetime, timedelta
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from fsdensity import (Config, ForcingMeteo, FSD_METHODS, instantiate_surfacedensity,
                       load_forcing)


def run_method(meteo, which_fsd, constant_density):
    """Density at every step of the record for one method."""
    config = Config({
        'fresh_snow_density:which_fsd': which_fsd,
        'fresh_snow_density:density': constant_density,
    })
    meteo.index = 0
    estimator = instantiate_surfacedensity(meteo, config)

    rho = np.empty(len(meteo))
    rho[0] = estimator.density()
    while meteo.advance():
        rho[meteo.index] = estimator.density()
    return rho


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('forcing', type=Path, help='CLM-format 1D forcing file')
    parser.add_argument('--dt', type=float, default=3600.0, help='Forcing timestep [s]')
    parser.add_argument('--start', default='2023-10-01', help='Date of the first record')
    parser.add_argument('--constant-density', type=float, default=100.0,
                        help='Density for the constant method [kg/m³]')
    parser.add_argument('--output', type=Path, default=Path('fresh_snow_density.png'))
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

    print("Loading forcing data...")
    forcing = load_forcing(args.forcing)
    meteo = ForcingMeteo(forcing)
    print(f"Loaded {len(meteo)} steps of forcing")
    print(f"  Annual mean temperature: {meteo.annualTskin():.2f} K")
    print(f"  Annual accumulation:     {meteo.annualAcc():.1f} mm w.e.")
    print(f"  Annual mean wind:        {meteo.annualW10m():.2f} m/s")

    start = datetime.fromisoformat(args.start)
    dates = [start + timedelta(seconds=i * args.dt) for i in range(len(meteo))]
    snowing = forcing[:, 2] > 0

    print("\nRunning methods...")
    results = {}
    for which_fsd, method in FSD_METHODS.items():
        print(f"  {which_fsd}: {method}...")
        results[method] = run_method(meteo, which_fsd, args.constant_density)

    fig, ax = plt.subplots(1, 1, figsize=(14, 6))
    colors = plt.cm.tab10(np.linspace(0, 1, len(results)))
    for (method, rho), color in zip(results.items(), colors):
        ax.plot(dates, np.where(snowing, rho, np.nan), '.', color=color,
                markersize=3, label=method, alpha=0.8)

    ax.set_xlabel('Date')
    ax.set_ylabel('Fresh snow density (kg/m³)')
    ax.set_title('Fresh snow density during snowfall')
    ax.legend(loc='upper left', fontsize=9)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(args.output, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved: {args.output}")

    print("\n" + "=" * 60)
    print("SUMMARY: Fresh snow density during snowfall")
    print("=" * 60)
    print(f"{'Method':<20} {'Mean':>10} {'Min':>10} {'Max':>10}")
    print("-" * 60)
    for method, rho in results.items():
        if not snowing.any():
            print(f"{method:<20} {'N/A':>10} {'N/A':>10} {'N/A':>10}")
            continue
        values = rho[snowing]
        print(f"{method:<20} {np.mean(values):>10.1f} {np.min(values):>10.1f} "
              f"{np.max(values):>10.1f}")

    plt.close()


if __name__ == '__main__':
    main()
