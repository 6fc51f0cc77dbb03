"""
Tests for workforce utilisation input and output models.
"""

import pytest
from pydantic import ValidationError

pytestmark = pytest.mark.unit

from workforce_report.domain.workforce_utilisation.models import (
    DisplayRow,
    EmployeePayload,
    ExternalPayload,
    Person,
    PersonKind,
    SourceRecord,
    UtilisationSnapshot,
)


def _row(**overrides):
    values = {
        "person": "Ada Lovelace",
        "past12Months": "73%",
        "y2d": "—",
        "june": "90%",
        "july": "66%",
        "august": "0%",
        "netEarningsPrevMonth": "1501 EUR",
    }
    values.update(overrides)
    return DisplayRow(**values)


class TestSourceRecord:
    def test_parses_camel_case_document_keys(self):
        record = SourceRecord.model_validate(
            {
                "employees": {
                    "firstname": "Ada",
                    "lastname": "Lovelace",
                    "status": "active",
                    "workforceUtilisation": {
                        "utilisationRateLastTwelveMonths": "0.73",
                        "lastThreeMonthsIndividually": [
                            {"month": "June", "utilisationRate": "0.9"}
                        ],
                        "quarterEarnings": [{"name": "Q3", "earnings": "100"}],
                    },
                }
            }
        )

        snapshot = record.employees.workforce_utilisation
        assert record.externals is None
        assert snapshot.rate_last_twelve_months == "0.73"
        assert snapshot.month_samples[0].utilisation_rate == "0.9"
        assert snapshot.quarter_earnings[0].earnings == "100"

    def test_unknown_fields_ignored(self):
        record = SourceRecord.model_validate(
            {
                "employees": {"status": "active", "_id": "x", "address": {"country": "DE"}},
                "teams": [{"name": "Platform"}],
                "somethingElse": 1,
            }
        )
        assert record.employees.status == "active"

    def test_empty_payload_counts_as_present(self):
        record = SourceRecord.model_validate({"externals": {}})
        assert isinstance(record.externals, ExternalPayload)
        assert record.externals.status is None

    def test_null_payload_is_absent(self):
        record = SourceRecord.model_validate({"employees": None})
        assert record.employees is None

    def test_external_monthly_cost(self):
        payload = ExternalPayload.model_validate({"monthlyCost": "7200.4"})
        assert payload.monthly_cost == "7200.4"

    def test_names_are_not_trimmed(self):
        payload = EmployeePayload.model_validate({"firstname": "Ada ", "status": "active"})
        assert payload.firstname == "Ada "

    @pytest.mark.parametrize("value", ["", False, 0, []])
    def test_falsy_non_mapping_payload_is_absent(self, value):
        record = SourceRecord.model_validate({"employees": value, "externals": value})
        assert record.employees is None
        assert record.externals is None

    def test_truthy_non_mapping_payload_is_empty(self):
        record = SourceRecord.model_validate({"employees": "Ada"})
        assert isinstance(record.employees, EmployeePayload)
        assert record.employees.status is None
        assert record.employees.firstname is None


class TestUtilisationSnapshotLeniency:
    """Malformed sub-fields degrade to absent values instead of failing."""

    def test_structured_rate_becomes_none(self):
        snapshot = UtilisationSnapshot.model_validate(
            {"utilisationRateYearToDate": {"value": "0.5"}}
        )
        assert snapshot.rate_year_to_date is None

    def test_boolean_rate_becomes_none(self):
        snapshot = UtilisationSnapshot.model_validate(
            {"utilisationRateLastTwelveMonths": True}
        )
        assert snapshot.rate_last_twelve_months is None

    def test_non_mapping_samples_are_skipped(self):
        snapshot = UtilisationSnapshot.model_validate(
            {
                "lastThreeMonthsIndividually": [
                    "June",
                    None,
                    {"month": "July", "utilisationRate": "0.5"},
                ]
            }
        )
        assert [s.month for s in snapshot.month_samples] == ["July"]

    def test_non_list_collection_is_empty(self):
        snapshot = UtilisationSnapshot.model_validate({"quarterEarnings": "Q3"})
        assert snapshot.quarter_earnings == []

    def test_non_mapping_snapshot_is_absent(self):
        payload = EmployeePayload.model_validate(
            {"status": "active", "workforceUtilisation": "n/a"}
        )
        assert payload.workforce_utilisation is None

    def test_find_month_returns_first_match(self):
        snapshot = UtilisationSnapshot.model_validate(
            {
                "lastThreeMonthsIndividually": [
                    {"month": "June", "utilisationRate": "0.1"},
                    {"month": "June", "utilisationRate": "0.9"},
                ]
            }
        )
        assert snapshot.find_month("June").utilisation_rate == "0.1"
        assert snapshot.find_month("July") is None

    def test_find_quarter(self):
        snapshot = UtilisationSnapshot.model_validate(
            {"quarterEarnings": [{"name": "Q2", "earnings": "1"}, {"name": "Q3", "earnings": "2"}]}
        )
        assert snapshot.find_quarter("Q3").earnings == "2"
        assert snapshot.find_quarter("Q4") is None


class TestPerson:
    def test_kind_flags(self):
        employee = Person(PersonKind.EMPLOYEE, EmployeePayload())
        external = Person(PersonKind.EXTERNAL, ExternalPayload())

        assert not employee.is_external
        assert external.is_external


class TestDisplayRow:
    def test_to_record_uses_display_column_names(self):
        record = _row(is_external=True).to_record()

        assert record == {
            "person": "Ada Lovelace",
            "past12Months": "73%",
            "y2d": "—",
            "june": "90%",
            "july": "66%",
            "august": "0%",
            "netEarningsPrevMonth": "1501 EUR",
        }

    def test_is_external_not_serialized(self):
        assert "is_external" not in _row(is_external=True).to_record()

    def test_populate_by_field_name(self):
        row = DisplayRow(
            person="x",
            past_12_months="1%",
            y2d="1%",
            june="1%",
            july="1%",
            august="1%",
            net_earnings_prev_month="0 EUR",
        )
        assert row.past_12_months == "1%"

    @pytest.mark.parametrize("bad", ["73", "73.5%", "n/a", "NaN%", ""])
    def test_rejects_malformed_percentage(self, bad):
        with pytest.raises(ValidationError):
            _row(june=bad)

    @pytest.mark.parametrize("bad", ["1501", "1501.2 EUR", "-0.5 EUR", "EUR"])
    def test_rejects_malformed_money(self, bad):
        with pytest.raises(ValidationError):
            _row(netEarningsPrevMonth=bad)

    def test_rows_are_immutable(self):
        row = _row()
        with pytest.raises(ValidationError):
            row.person = "Someone Else"
