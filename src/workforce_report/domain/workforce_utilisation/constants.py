"""Workforce Utilisation domain - Constants.

Literal values shared by the row builder, the formatters and the exporters.
"""

from __future__ import annotations

from typing import Tuple

ACTIVE_STATUS = "active"

# Shown when a metric is not available; distinct from a true zero
PLACEHOLDER = "—"

CURRENCY = "EUR"
ZERO_MONEY = f"0 {CURRENCY}"

EXTERNAL_SUFFIX = " (External)"

# Quarter whose earnings are reported as previous-month net earnings
NET_EARNINGS_QUARTER = "Q3"

# Report month label -> DisplayRow field name
REPORT_MONTHS: Tuple[Tuple[str, str], ...] = (
    ("June", "june"),
    ("July", "july"),
    ("August", "august"),
)

# Serialized column order handed to display collaborators
DISPLAY_COLUMNS: Tuple[str, ...] = (
    "person",
    "past12Months",
    "y2d",
    "june",
    "july",
    "august",
    "netEarningsPrevMonth",
)

PERCENTAGE_PATTERN = r"^(—|-?\d+%)$"
MONEY_PATTERN = r"^-?\d+ EUR$"
