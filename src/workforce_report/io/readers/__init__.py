"""Readers for personnel source documents."""

from .json_reader import SourceDataError, read_source_records

__all__ = ["SourceDataError", "read_source_records"]
