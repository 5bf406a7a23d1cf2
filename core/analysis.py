import numpy as np
import pandas as pd
from .geometry import predict

ERROR_TYPES = ("TP", "TN", "FP", "FN")


def make_point_table(points, line) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "row_id": np.arange(len(points)),
            "x": [p.x for p in points],
            "y": [p.y for p in points],
            "y_true": np.array([p.actual for p in points], dtype=int),
        }
    )
    df["y_pred"] = predict(points, line)
    df["error_type"] = np.select(
        [
            (df["y_true"] == 1) & (df["y_pred"] == 1),
            (df["y_true"] == 0) & (df["y_pred"] == 0),
            (df["y_true"] == 0) & (df["y_pred"] == 1),
        ],
        ["TP", "TN", "FP"],
        default="FN",
    )
    return df


def filter_table(df: pd.DataFrame, kind: str) -> pd.DataFrame:
    if kind in ERROR_TYPES:
        return df[df["error_type"] == kind]
    return df


def error_summary(df: pd.DataFrame) -> dict[str, int]:
    counts = df["error_type"].value_counts()
    return {k: int(counts.get(k, 0)) for k in ERROR_TYPES}
