"""
Committed paths <-> stroke CSV.

Layout matches the rest of the Kolam tooling: one column pair per stroke,
``x-kolam <i>`` / ``y-kolam <i>`` (1-based), shorter strokes padded with NaN.
"""

import io

import numpy as np
import pandas as pd


def paths_to_frame(paths) -> pd.DataFrame:
    longest = max((len(p) for p in paths), default=0)
    out = {}
    for i, path in enumerate(paths, start=1):
        P = np.full((longest, 2), np.nan)
        if len(path):
            P[:len(path)] = np.asarray(path, dtype=float)
        out[f"x-kolam {i}"] = P[:, 0]
        out[f"y-kolam {i}"] = P[:, 1]
    return pd.DataFrame(out)


def paths_to_csv_bytes(paths) -> bytes:
    buf = io.StringIO()
    paths_to_frame(paths).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def save_strokes_csv(paths, csv_path):
    paths_to_frame(paths).to_csv(csv_path, index=False)
    return csv_path


def load_strokes_csv(csv_path):
    """Read strokes back as point tuples; returns (paths, None) or (None, err)."""
    try:
        df = pd.read_csv(csv_path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        return (None, e)

    paths = []
    for col in df.columns:
        if col.startswith("x-kolam"):
            idx = col.split()[-1]
            y_col = f"y-kolam {idx}"
            if y_col not in df.columns:
                return (None, ValueError(f"Missing column '{y_col}'"))
            P = np.c_[df[col].to_numpy(dtype=float), df[y_col].to_numpy(dtype=float)]
            P = P[np.isfinite(P).all(axis=1)]
            if len(P) < 2:
                continue
            paths.append(tuple((float(x), float(y)) for x, y in P))
    return (tuple(paths), None)


__all__ = ["load_strokes_csv", "paths_to_csv_bytes", "paths_to_frame", "save_strokes_csv"]
