"""
Pydantic v2 data models for the workforce utilisation domain.

Input models mirror the personnel source document (camelCase keys, lenient
types, unknown keys ignored). The output model is the flat DisplayRow handed
to the table renderer. Between the two sits the Person variant, which carries
exactly one payload kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from .constants import MONEY_PATTERN, PERCENTAGE_PATTERN

# Rates, earnings and costs arrive as numeric strings, occasionally as numbers
NumericLike = Union[str, int, float]


def _numeric_like_or_none(v: Any) -> Optional[NumericLike]:
    """Keep scalar numeric-ish values, drop anything structured."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (str, int, float)):
        return v
    return None


def _mappings_only(v: Any) -> List[Any]:
    """Keep only mapping entries of a list, treating a non-list as empty."""
    if not isinstance(v, (list, tuple)):
        return []
    return [item for item in v if isinstance(item, (dict, BaseModel))]


class _SourceModel(BaseModel):
    model_config = ConfigDict(
        # Source documents carry many fields the report never reads
        extra="ignore",
        populate_by_name=True,
    )


class MonthSample(_SourceModel):
    """Utilisation rate of a single named month."""

    month: Optional[str] = Field(None, description="Month name, e.g. 'June'")
    utilisation_rate: Optional[NumericLike] = Field(
        None, alias="utilisationRate", description="Fraction, e.g. '0.73'"
    )

    @field_validator("month", mode="before")
    @classmethod
    def coerce_month(cls, v):
        return None if v is None else str(v)

    @field_validator("utilisation_rate", mode="before")
    @classmethod
    def clean_rate(cls, v):
        return _numeric_like_or_none(v)


class QuarterEarnings(_SourceModel):
    """Earnings booked for one quarter (employees only)."""

    name: Optional[str] = Field(None, description="Quarter name, 'Q1'..'Q4'")
    earnings: Optional[NumericLike] = Field(None, description="Earnings amount")
    start: Optional[str] = None
    end: Optional[str] = None

    @field_validator("name", "start", "end", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return None if v is None else str(v)

    @field_validator("earnings", mode="before")
    @classmethod
    def clean_earnings(cls, v):
        return _numeric_like_or_none(v)


class UtilisationSnapshot(_SourceModel):
    """Overall and per-month utilisation rates plus quarterly earnings."""

    rate_last_twelve_months: Optional[NumericLike] = Field(
        None, alias="utilisationRateLastTwelveMonths"
    )
    rate_year_to_date: Optional[NumericLike] = Field(
        None, alias="utilisationRateYearToDate"
    )
    month_samples: List[MonthSample] = Field(
        default_factory=list, alias="lastThreeMonthsIndividually"
    )
    quarter_earnings: List[QuarterEarnings] = Field(
        default_factory=list, alias="quarterEarnings"
    )

    @field_validator("rate_last_twelve_months", "rate_year_to_date", mode="before")
    @classmethod
    def clean_rates(cls, v):
        return _numeric_like_or_none(v)

    @field_validator("month_samples", "quarter_earnings", mode="before")
    @classmethod
    def clean_collections(cls, v):
        return _mappings_only(v)

    def find_month(self, month: str) -> Optional[MonthSample]:
        """Return the first sample for ``month``; later duplicates are ignored."""
        return next((s for s in self.month_samples if s.month == month), None)

    def find_quarter(self, name: str) -> Optional[QuarterEarnings]:
        return next((q for q in self.quarter_earnings if q.name == name), None)


class EmployeePayload(_SourceModel):
    """Internal employee as found under the ``employees`` key."""

    firstname: Optional[str] = None
    lastname: Optional[str] = None
    status: Optional[str] = None
    workforce_utilisation: Optional[UtilisationSnapshot] = Field(
        None, alias="workforceUtilisation"
    )

    @field_validator("firstname", "lastname", "status", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return None if v is None else str(v)

    @field_validator("workforce_utilisation", mode="before")
    @classmethod
    def clean_snapshot(cls, v):
        """A snapshot that is not a mapping counts as absent."""
        if isinstance(v, (dict, BaseModel)):
            return v
        return None


class ExternalPayload(EmployeePayload):
    """External contractor as found under the ``externals`` key."""

    monthly_cost: Optional[NumericLike] = Field(None, alias="monthlyCost")

    @field_validator("monthly_cost", mode="before")
    @classmethod
    def clean_monthly_cost(cls, v):
        return _numeric_like_or_none(v)


class SourceRecord(_SourceModel):
    """
    One person-slot of the source document.

    At most one of ``employees``/``externals`` is expected; ``teams`` is
    metadata the report does not use.
    """

    employees: Optional[EmployeePayload] = None
    externals: Optional[ExternalPayload] = None
    teams: Optional[Any] = None

    @field_validator("employees", "externals", mode="before")
    @classmethod
    def clean_payload(cls, v):
        """
        A falsy non-mapping value ("", False, 0) means no payload; any other
        non-mapping value is a payload with no readable fields.
        """
        if isinstance(v, (dict, BaseModel)):
            return v
        if not v:
            return None
        return {}


class PersonKind(str, Enum):
    EMPLOYEE = "employee"
    EXTERNAL = "external"


@dataclass(frozen=True)
class Person:
    """A classified record: exactly one payload and its kind."""

    kind: PersonKind
    payload: Union[EmployeePayload, ExternalPayload]

    @property
    def is_external(self) -> bool:
        return self.kind is PersonKind.EXTERNAL


class DisplayRow(BaseModel):
    """
    Output row for the utilisation table.

    Field aliases are the column keys the display layer reads; ``is_external``
    is kept for callers but left out of serialized rows.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )

    person: str = Field(..., description="Display name")
    past_12_months: str = Field(
        ..., alias="past12Months", pattern=PERCENTAGE_PATTERN
    )
    y2d: str = Field(..., pattern=PERCENTAGE_PATTERN)
    june: str = Field(..., pattern=PERCENTAGE_PATTERN)
    july: str = Field(..., pattern=PERCENTAGE_PATTERN)
    august: str = Field(..., pattern=PERCENTAGE_PATTERN)
    net_earnings_prev_month: str = Field(
        ..., alias="netEarningsPrevMonth", pattern=MONEY_PATTERN
    )
    is_external: bool = Field(default=False, exclude=True)

    def to_record(self) -> Dict[str, str]:
        """Serialize with the display column names."""
        return self.model_dump(by_alias=True)
