"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: table.py
Description:
    Loading score tables from CSV files and plain mappings.

    Values are kept as strings so that validation happens in one place
    (stats.aggregate), exactly as for form input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

import pandas as pd

from hensachi.models import RawRow

logger = logging.getLogger(__name__)

SCORE_COLUMN = "score"
COUNT_COLUMN = "count"


def _has_header(first_row: list[str]) -> bool:
    names = [c.strip().lower() for c in first_row]
    return SCORE_COLUMN in names and COUNT_COLUMN in names


def rows_from_frame(df: pd.DataFrame) -> list[RawRow]:
    """Convert a DataFrame with ``score`` and ``count`` columns to raw rows."""
    missing = {SCORE_COLUMN, COUNT_COLUMN} - set(df.columns)
    if missing:
        raise ValueError(f"Missing column(s): {', '.join(sorted(missing))}")
    return [
        RawRow(score=str(score).strip(), count=str(count).strip())
        for score, count in zip(df[SCORE_COLUMN], df[COUNT_COLUMN])
    ]


def load_table(path: str | Path) -> list[RawRow]:
    """Load a two-column score table from CSV.

    The header line (``score,count``, any case/order) is optional; without
    it the first two columns are taken as score and count.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        ValueError: the file has fewer than two columns, a header lacks a
            column, or the CSV cannot be parsed.
    """
    path = Path(path)
    try:
        first_line = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, nrows=1)
    except pd.errors.EmptyDataError:
        first_line = pd.DataFrame()
    if first_line.empty:
        logger.warning("Score table is empty: %s", path)
        return []

    if _has_header(list(first_line.iloc[0])):
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
        df.columns = [c.strip().lower() for c in df.columns]
    else:
        df = pd.read_csv(
            path, header=None, dtype=str, keep_default_na=False, skipinitialspace=True,
        )
        if df.shape[1] < 2:
            raise ValueError(
                f"Expected score and count columns, found {df.shape[1]} in {path}"
            )
        df = df.iloc[:, :2]
        df.columns = [SCORE_COLUMN, COUNT_COLUMN]

    rows = rows_from_frame(df)
    logger.info("Loaded %d rows from %s", len(rows), path)
    return rows


def rows_from_mapping(counts: Mapping[object, object]) -> list[RawRow]:
    """Build rows from a ``{score: count}`` mapping."""
    return [RawRow(score=str(s), count=str(c)) for s, c in counts.items()]


def rows_from_records(records: Iterable[Mapping[str, object]]) -> list[RawRow]:
    """Build rows from ``{"score": ..., "count": ...}`` records (e.g. a Dash table)."""
    return [
        RawRow(
            score="" if r.get(SCORE_COLUMN) is None else str(r.get(SCORE_COLUMN)),
            count="" if r.get(COUNT_COLUMN) is None else str(r.get(COUNT_COLUMN)),
        )
        for r in records
    ]
