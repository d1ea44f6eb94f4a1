"""
Export and import of sweep results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from .data_classes import SweepResult

Z_COLUMN = "z/rd"
POINT_SOURCE_COLUMN = "point source"
MODEL_COLUMN = "Model"
RELATIVE_ERROR_COLUMN = "Relative uncertainty"

TABLE_COLUMNS = [Z_COLUMN, POINT_SOURCE_COLUMN, MODEL_COLUMN, RELATIVE_ERROR_COLUMN]


def sweep_to_dataframe(result: SweepResult) -> pd.DataFrame:
    """Sweep result as a table with one row per distance."""
    return pd.DataFrame({
        Z_COLUMN: result.z,
        POINT_SOURCE_COLUMN: result.point_source,
        MODEL_COLUMN: result.efficiencies,
        RELATIVE_ERROR_COLUMN: result.relative_errors,
    }, columns=TABLE_COLUMNS)


def export_sweep_to_tsv(result: SweepResult, filename: Union[str, Path] = "geometric_efficiency.txt"):
    """Write a sweep result as a tab-separated table.

    Parameters
    ----------
    result : SweepResult
        Result of :func:`run_sweep`.
    filename : str or Path
        Output file. Parent directories are created if needed.
    """
    if not result.points:
        print("[warning] No sweep points to export.")
        return

    output_path = Path(filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = sweep_to_dataframe(result)
    df.to_csv(output_path, sep="\t", index=False)

    print(f"[info] Sweep results exported to {output_path}")
    print(f"[info] Total distances: {len(df)}")


def load_sweep_table(filename: Union[str, Path]) -> pd.DataFrame:
    """Read a table written by :func:`export_sweep_to_tsv`."""
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"Sweep table '{path}' does not exist")

    df = pd.read_csv(path, sep="\t")
    missing = [c for c in TABLE_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Sweep table '{path}' is missing columns: {', '.join(missing)}")
    return df
