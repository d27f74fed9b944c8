"""
Project: Hensachi
File Created: 2026-10-19
Author: Xingnan Zhu
File Name: test_table.py
Description:
    Tests for loading score tables.
"""

import pandas as pd
import pytest

from hensachi.io.table import (
    load_table,
    rows_from_frame,
    rows_from_mapping,
    rows_from_records,
)
from hensachi.models import RawRow
from hensachi.stats.aggregate import aggregate


class TestLoadTable:
    def test_with_header(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("score,count\n60,2\n80,3\n100,1\n")
        rows = load_table(path)
        assert rows == [RawRow("60", "2"), RawRow("80", "3"), RawRow("100", "1")]

    def test_header_any_order_and_case(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("Count, Score\n2,60\n3,80\n")
        assert load_table(path) == [RawRow("60", "2"), RawRow("80", "3")]

    def test_without_header(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("60,2\n80,3\n")
        assert load_table(path) == [RawRow("60", "2"), RawRow("80", "3")]

    def test_blank_cells_kept_as_empty_strings(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("score,count\n,10\n50,0\n70,5\n")
        rows = load_table(path)
        assert rows[0] == RawRow("", "10")
        stats = aggregate(rows)
        assert stats.n_rows == 1
        assert stats.average == 70.0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert load_table(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_table(tmp_path / "nope.csv")

    def test_single_column_rejected(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("70\n80\n")
        with pytest.raises(ValueError, match="score and count columns"):
            load_table(path)

    def test_extra_columns_ignored(self, tmp_path):
        path = tmp_path / "scores.csv"
        path.write_text("60,2,a\n80,3,b\n")
        assert load_table(path) == [RawRow("60", "2"), RawRow("80", "3")]


class TestRowBuilders:
    def test_from_frame(self):
        df = pd.DataFrame({"score": [60, 80], "count": [2, 3]})
        assert rows_from_frame(df) == [RawRow("60", "2"), RawRow("80", "3")]

    def test_from_frame_missing_column(self):
        with pytest.raises(ValueError, match="count"):
            rows_from_frame(pd.DataFrame({"score": [1]}))

    def test_from_mapping(self):
        assert rows_from_mapping({60: 2, 80: 3}) == [RawRow("60", "2"), RawRow("80", "3")]

    def test_from_records_handles_none(self):
        rows = rows_from_records([{"score": 60, "count": 2}, {"score": None}])
        assert rows == [RawRow("60", "2"), RawRow("", "")]
