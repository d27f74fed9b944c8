"""Score table loaders."""

from hensachi.io.table import load_table, rows_from_frame, rows_from_mapping, rows_from_records

__all__ = ["load_table", "rows_from_frame", "rows_from_mapping", "rows_from_records"]
