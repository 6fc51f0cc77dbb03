"""
Tabular export of report rows.

Rows leave the core as DisplayRow models; display collaborators get them as a
pandas DataFrame, a CSV file or a JSON array, always with the columns in
DISPLAY_COLUMNS order. No value is reinterpreted here.
"""

import json
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from workforce_report.domain.workforce_utilisation.constants import DISPLAY_COLUMNS
from workforce_report.domain.workforce_utilisation.models import DisplayRow
from workforce_report.utils.logging import get_logger

logger = get_logger(__name__)


def rows_to_frame(rows: Sequence[DisplayRow]) -> pd.DataFrame:
    """Build a string-typed DataFrame, one line per row, in row order."""
    records = [row.to_record() for row in rows]
    return pd.DataFrame.from_records(records, columns=list(DISPLAY_COLUMNS)).astype(
        str
    )


def rows_to_json(rows: Sequence[DisplayRow], indent: int = 2) -> str:
    records: List[dict] = [row.to_record() for row in rows]
    return json.dumps(records, ensure_ascii=False, indent=indent)


def write_rows_csv(rows: Sequence[DisplayRow], output_path: Union[str, Path]) -> Path:
    """
    Write rows to a UTF-8 CSV file with a header line.

    Args:
        rows: Report rows in display order
        output_path: Target file; parent directories are created

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows_to_frame(rows).to_csv(path, index=False, encoding="utf-8")

    logger.info("rows_exported", format="csv", path=str(path), rows=len(rows))
    return path
