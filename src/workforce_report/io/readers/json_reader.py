"""
JSON source reading for Workforce Report.

The personnel export is a single JSON array with one object per person-slot
(``employees``, ``externals`` and ``teams`` keys). This reader only checks the
document shape; validating individual records is the row builder's job.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from workforce_report.utils.logging import get_logger

logger = get_logger(__name__)


class SourceDataError(Exception):
    """Raised when the source document cannot be read."""

    pass


def read_source_records(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read the source document and return its records in document order.

    Args:
        file_path: Path to the JSON source document

    Returns:
        List of raw record mappings; non-object entries are passed through
        unchanged so the row builder can account for them

    Raises:
        SourceDataError: If the file is missing, is not valid JSON, or does
            not contain a JSON array
    """
    path = Path(file_path)
    if not path.is_file():
        raise SourceDataError(f"Source file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as fh:
            document = json.load(fh)
    except json.JSONDecodeError as e:
        raise SourceDataError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceDataError(f"Cannot read {path}: {e}") from e

    if not isinstance(document, list):
        raise SourceDataError(
            f"Expected a JSON array of records in {path}, "
            f"got {type(document).__name__}"
        )

    logger.info("source_records_read", path=str(path), records=len(document))
    return document
