"""Workforce Utilisation domain.

Derives one presentation-ready row per active employee or external:
utilisation percentages (past twelve months, year to date, June, July,
August) and previous-month net earnings in EUR.
"""

from .formatting import format_money, format_percentage
from .models import (
    DisplayRow,
    EmployeePayload,
    ExternalPayload,
    MonthSample,
    Person,
    PersonKind,
    QuarterEarnings,
    SourceRecord,
    UtilisationSnapshot,
)
from .service import build_row, build_rows, classify_record, rejection_reason

__all__ = [
    # Models
    "DisplayRow",
    "EmployeePayload",
    "ExternalPayload",
    "MonthSample",
    "Person",
    "PersonKind",
    "QuarterEarnings",
    "SourceRecord",
    "UtilisationSnapshot",
    # Formatting
    "format_money",
    "format_percentage",
    # Service
    "build_row",
    "build_rows",
    "classify_record",
    "rejection_reason",
]
