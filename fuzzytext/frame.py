"""
Batch scoring over pandas DataFrames.

- `score_columns`: row-wise score and equality flag between two text columns.
- `best_match`: for each row, the candidate column most similar to a source
  column (first column wins ties).

Missing cells (NaN/None) are scored as empty strings.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd

from .fuzzy_ngram import Fuzzy, default

logger = logging.getLogger(__name__)


def _norm(x) -> str:
    if x is None or (not isinstance(x, str) and pd.isna(x)):
        return ""
    return str(x)


def _require(df: pd.DataFrame, cols: List[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found: {missing}")


def score_columns(
    df: pd.DataFrame,
    col_a: str,
    col_b: str,
    fuzzy: Optional[Fuzzy] = None,
    prefix: str = "fuzzy",
) -> pd.DataFrame:
    fuzzy = fuzzy or default
    _require(df, [col_a, col_b])
    df_out = df.copy()
    scores = [fuzzy.compare(_norm(a), _norm(b)) for a, b in zip(df_out[col_a], df_out[col_b])]
    df_out[f"{prefix}_score"] = pd.Series(scores, index=df_out.index, dtype="float64")
    df_out[f"{prefix}_equal"] = df_out[f"{prefix}_score"] >= fuzzy.options.text_threshold
    logger.info(
        "Scored %d rows (%s vs %s), %d above threshold",
        len(df_out), col_a, col_b, int(df_out[f"{prefix}_equal"].sum()),
    )
    return df_out


def best_match(
    df: pd.DataFrame,
    source_col: str,
    candidate_cols: List[str],
    fuzzy: Optional[Fuzzy] = None,
) -> pd.DataFrame:
    fuzzy = fuzzy or default
    _require(df, [source_col] + list(candidate_cols))
    best_scores = []
    best_cols = []
    for _, row in df.iterrows():
        src = _norm(row[source_col])
        scores = [(fuzzy.compare(src, _norm(row[c])), c) for c in candidate_cols]
        sc, bc = max(scores, key=lambda t: t[0]) if scores else (None, None)
        best_scores.append(sc)
        best_cols.append(bc)
    return pd.DataFrame({"best_score": best_scores, "best_column": best_cols}, index=df.index)
