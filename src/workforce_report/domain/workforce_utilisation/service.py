"""
Pure transformation service for the workforce utilisation report.

``build_rows`` maps the personnel source records to display rows in a single
pass. It never raises for bad input: records that are not an active person,
or that cannot be read at all, are filtered out and logged; missing metrics
become placeholders.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from workforce_report.utils.logging import get_logger

from .constants import (
    ACTIVE_STATUS,
    EXTERNAL_SUFFIX,
    NET_EARNINGS_QUARTER,
    REPORT_MONTHS,
)
from .formatting import format_money, format_percentage
from .models import (
    DisplayRow,
    EmployeePayload,
    ExternalPayload,
    NumericLike,
    Person,
    PersonKind,
    SourceRecord,
    UtilisationSnapshot,
)

logger = get_logger(__name__)

RecordLike = Union[SourceRecord, Mapping[str, Any]]

# Drop reasons, also used as keys of the summary log event
REASON_INVALID = "invalid_record"
REASON_NO_PERSON = "no_person"
REASON_AMBIGUOUS = "ambiguous_person"
REASON_INACTIVE = "inactive"


def build_rows(source_records: Optional[Iterable[RecordLike]]) -> List[DisplayRow]:
    """
    Build the utilisation table rows for all active persons.

    Args:
        source_records: Source records in document order, either raw
            mappings or validated SourceRecord models

    Returns:
        One DisplayRow per active employee or external, in input order
    """
    if source_records is None:
        logger.info("rows_built", source_records=0, rows=0, dropped={})
        return []

    rows: List[DisplayRow] = []
    dropped: Dict[str, int] = {}
    total = 0

    for index, raw in enumerate(source_records):
        total += 1
        record = _coerce_record(raw, index)
        person = classify_record(record) if record is not None else None

        if person is None:
            reason = REASON_INVALID if record is None else rejection_reason(record)
            dropped[reason] = dropped.get(reason, 0) + 1
            logger.debug("record_dropped", index=index, reason=reason)
            continue

        rows.append(build_row(person))

    logger.info("rows_built", source_records=total, rows=len(rows), dropped=dropped)
    return rows


def _coerce_record(raw: Any, index: int) -> Optional[SourceRecord]:
    if isinstance(raw, SourceRecord):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning(
            "record_not_a_mapping", index=index, type=type(raw).__name__
        )
        return None
    try:
        return SourceRecord.model_validate(dict(raw))
    except ValidationError as e:
        logger.warning(
            "record_validation_failed", index=index, errors=e.error_count()
        )
        return None


def rejection_reason(record: SourceRecord) -> Optional[str]:
    """
    Explain why a record yields no row, or return None when it does.

    A record holding both an employee and an external payload is rejected
    rather than guessed at.
    """
    is_employee = record.employees is not None
    is_external = record.externals is not None

    if not is_employee and not is_external:
        return REASON_NO_PERSON
    if is_employee and is_external:
        return REASON_AMBIGUOUS

    payload = record.employees if is_employee else record.externals
    if payload.status != ACTIVE_STATUS:
        return REASON_INACTIVE
    return None


def classify_record(record: SourceRecord) -> Optional[Person]:
    """Turn a record into its Person variant, or None if it must be dropped."""
    if rejection_reason(record) is not None:
        return None
    if record.employees is not None:
        return Person(PersonKind.EMPLOYEE, record.employees)
    return Person(PersonKind.EXTERNAL, record.externals)


def build_row(person: Person) -> DisplayRow:
    """Derive the display row of a single classified person."""
    snapshot = person.payload.workforce_utilisation
    if snapshot is None:
        snapshot = UtilisationSnapshot()

    months: Dict[str, str] = {}
    for month_name, field_name in REPORT_MONTHS:
        sample = snapshot.find_month(month_name)
        months[field_name] = format_percentage(
            sample.utilisation_rate if sample is not None else None
        )

    return DisplayRow(
        person=display_name(person),
        past_12_months=format_percentage(snapshot.rate_last_twelve_months),
        y2d=format_percentage(snapshot.rate_year_to_date),
        net_earnings_prev_month=format_money(
            net_earnings_source(person), is_external=person.is_external
        ),
        is_external=person.is_external,
        **months,
    )


def display_name(person: Person) -> str:
    """
    Compose "first last", marking externals.

    Examples:
        Ada Lovelace
        Ada Lovelace (External)
    """
    first = person.payload.firstname or ""
    last = person.payload.lastname or ""
    name = f"{first} {last}"
    if person.is_external:
        name += EXTERNAL_SUFFIX
    return name


def net_earnings_source(person: Person) -> NumericLike:
    """
    Pick the raw amount shown as previous-month net earnings.

    Employees report their Q3 earnings, externals their monthly cost; both
    default to "0".
    """
    if person.kind is PersonKind.EMPLOYEE:
        return _quarter_earnings(person.payload, NET_EARNINGS_QUARTER) or "0"
    return _monthly_cost(person.payload) or "0"


def _quarter_earnings(
    payload: EmployeePayload, quarter: str
) -> Optional[NumericLike]:
    snapshot: Optional[UtilisationSnapshot] = payload.workforce_utilisation
    if snapshot is None:
        return None
    entry = snapshot.find_quarter(quarter)
    return entry.earnings if entry is not None else None


def _monthly_cost(payload: ExternalPayload) -> Optional[NumericLike]:
    return payload.monthly_cost
