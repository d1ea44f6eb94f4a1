"""
Sweep results visualization.

This module provides plots of the efficiency sweep against the point-source
approximation, a hit map of the rays projected on the detector plane, and a
console summary of a sweep.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .. import config
from ..core.data_classes import DetectorShape, PointBatch, SourceProfile, SweepResult
from ..core.generators import generate_isotropic, generate_source
from ..core.projection import hit_mask, translate
from ..core.sweep import point_source


def visualize_sweep(result: SweepResult, save_path: Optional[str] = None, show: bool = True):
    """Plot efficiency versus distance with the point-source curve.

    Parameters
    ----------
    result : SweepResult
        Result of :func:`run_sweep`.
    save_path : str, optional
        Base path for saving the figure.
    show : bool
        Open an interactive window.
    """
    if not result.points:
        print("[warning] No sweep points to visualize.")
        return None

    z = result.z
    efficiencies = result.efficiencies
    errors = np.nan_to_num(result.absolute_errors, nan=0.0)
    ps = result.point_source
    source = result.config.source
    detector = result.config.detector

    fig, axes = plt.subplots(2, 1, figsize=config.EFFICIENCY_FIGSIZE, sharex=True,
                             gridspec_kw={"height_ratios": [3, 1]})

    # 1. Efficiency curve (top)
    ax1 = axes[0]
    ax1.errorbar(z, efficiencies, yerr=errors, fmt='o', color=config.MODEL_COLOR,
                 capsize=3, label=f'Model ({source.kind.value}, size={source.size:g})')
    z_fine = np.linspace(z.min(), z.max(), 200)
    ax1.plot(z_fine, point_source(z_fine), '-', color=config.POINT_SOURCE_COLOR,
             label='Point source approximation')
    ax1.set_ylabel('Geometric efficiency (%)')
    title = f'Geometric Efficiency ({detector.kind.value} detector'
    if detector.is_annular:
        title += f', inner/outer={detector.ratio:g}'
    ax1.set_title(title + f', N=10^{result.config.power})')
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # 2. Ratio to point source (bottom)
    ax2 = axes[1]
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = np.where(ps > 0, efficiencies / ps, np.nan)
    ax2.plot(z, ratio, 'o-', color=config.MODEL_COLOR)
    ax2.axhline(1.0, color=config.POINT_SOURCE_COLOR, linestyle='--', linewidth=1)
    ax2.set_xlabel('z / r_d')
    ax2.set_ylabel('Model / point source')
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(f"{save_path}_sweep.png", dpi=config.PLOT_DPI, bbox_inches='tight')
        print(f"[info] Saved sweep visualization to {save_path}_sweep.png")

    if show:
        plt.show()
    return fig


def visualize_detector_hits(
    z: float,
    source: SourceProfile,
    detector: Optional[DetectorShape] = None,
    n_samples: int = 2000,
    seed: int = config.DEFAULT_RANDOM_SEED,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Scatter the projected ray positions on the detector plane.

    Uses the same source/emission sampling as :func:`evaluate`, so the
    fraction of red points times 50 is the efficiency estimate.
    """
    detector = detector or DetectorShape.circular()

    positions = generate_source(PointBatch.empty(n_samples), source, seed)
    emission = generate_isotropic(PointBatch.empty(n_samples), z, seed + 1)
    translate(positions, emission.x, emission.y)
    hits = hit_mask(positions)
    if detector.is_annular:
        hits &= ~hit_mask(positions, detector.ratio)

    fig, ax = plt.subplots(figsize=(7, 7))
    ax.scatter(positions.x[~hits], positions.y[~hits], s=4, alpha=0.4, color='gray', label='Miss')
    ax.scatter(positions.x[hits], positions.y[hits], s=4, alpha=0.6, color=config.MODEL_COLOR, label='Hit')
    ax.add_patch(Circle((0, 0), 1.0, fill=False, edgecolor='black', linewidth=2,
                        label='Detector boundary'))
    if detector.is_annular:
        ax.add_patch(Circle((0, 0), detector.ratio, fill=False, edgecolor='black',
                            linestyle='--', linewidth=2))

    ax.set_xlim(-3, 3)
    ax.set_ylim(-3, 3)
    ax.set_aspect('equal')
    ax.set_xlabel('x / r_d')
    ax.set_ylabel('y / r_d')
    ax.set_title(f'Projected rays at z = {z:g} r_d ({int(hits.sum())} hits / {n_samples})')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right')

    plt.tight_layout()

    if save_path:
        plt.savefig(f"{save_path}_detector_hits.png", dpi=config.PLOT_DPI, bbox_inches='tight')
        print(f"[info] Saved detector hit visualization to {save_path}_detector_hits.png")

    if show:
        plt.show()
    return fig


def print_statistics(result: SweepResult):
    """Print a summary table of a sweep."""
    if not result.points:
        print("\n[Statistics] No sweep points to display.")
        return

    cfg = result.config
    z_last = result.points[-1].z

    print("\n" + "=" * 70)
    print("GEOMETRIC EFFICIENCY SWEEP")
    print("=" * 70)
    print(f"Source: {cfg.source.kind.value}, size = {cfg.source.size:g} r_d")
    if cfg.detector.is_annular:
        print(f"Detector: annular, inner/outer = {cfg.detector.ratio:g}")
    else:
        print("Detector: circular")
    print(f"Samples per distance: {cfg.n_samples:,} (10^{cfg.power})")
    print(f"Initial seed: {cfg.seed}")
    print()
    print(f"{'z/rd':>8}  {'Completion':>10}  {'Point src (%)':>13}  {'Model (%)':>10}  {'Rel. err (%)':>12}")
    for p in result.points:
        completion = p.z / z_last if z_last > 0 else 1.0
        print(f"{p.z:8.4f}  {completion:10.4f}  {p.point_source_percent:13.4f}  "
              f"{p.efficiency_percent:10.4f}  {p.relative_error_percent:12.4f}")
    print("=" * 70 + "\n")
