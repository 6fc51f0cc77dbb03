"""Adapters handing report rows to display collaborators."""

from .table_export import rows_to_frame, rows_to_json, write_rows_csv

__all__ = ["rows_to_frame", "rows_to_json", "write_rows_csv"]
