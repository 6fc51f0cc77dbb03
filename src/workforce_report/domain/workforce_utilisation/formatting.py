"""
Presentation formatting for utilisation rates and money amounts.

Both formatters parse through ``Decimal`` from the value's string form and
round with ROUND_HALF_UP, so ``"0.735"`` renders as ``"74%"`` and ``"-200.5"``
as ``"-201 EUR"`` regardless of binary float representation. A rounded zero
is always rendered unsigned.

Rates are parsed strictly; money amounts are read from their leading number,
so trailing text such as a currency code is ignored.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

from workforce_report.utils.logging import get_logger

from .constants import CURRENCY, PLACEHOLDER, ZERO_MONEY

logger = get_logger(__name__)

_WHOLE = Decimal("1")
_HUNDRED = Decimal("100")
_MIN_MONEY = Decimal("0.01")

# Sign, digits with optional fraction, optional exponent
_LEADING_NUMBER = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a numeric-as-string (or number) into a finite Decimal.

    Returns:
        The parsed value, or None for empty, non-numeric or non-finite input
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not parsed.is_finite():
        return None
    return parsed


def parse_leading_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse the longest numeric prefix of a string, ignoring what follows.

    Money fields carry values such as ``"1500 EUR"``; the amount is the
    leading number, so ``"1500 EUR"`` parses as 1500 and ``"1,500.50"`` as 1.
    Non-string input is parsed as by ``parse_decimal``.

    Returns:
        The parsed value, or None when the text does not start with a number
    """
    if not isinstance(value, str):
        return parse_decimal(value)

    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return parse_decimal(match.group(0))


def _round_whole(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        # quantize needs room for every integer digit
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        rounded = value.quantize(_WHOLE, rounding=ROUND_HALF_UP)
    # Drop the sign of a negative zero
    return rounded if rounded else Decimal(0)


def format_percentage(value: Any) -> str:
    """
    Render a utilisation fraction as a whole percentage.

    ``None`` and ``""`` mean "not available" and render as the placeholder;
    ``"0"`` is a real zero and renders as ``"0%"``. Numeric ``0``/``0.0`` also
    render as ``"0%"``, unlike the earlier dashboard, which showed them as
    the placeholder because it tested the value for truthiness. A value that
    is present but not numeric renders as the placeholder.

    Examples:
        >>> format_percentage("0.734")
        '73%'
        >>> format_percentage("0")
        '0%'
        >>> format_percentage(None)
        '—'
    """
    if value is None or value == "":
        return PLACEHOLDER

    fraction = parse_decimal(value)
    if fraction is None:
        logger.debug("unparsable_percentage", value=str(value))
        return PLACEHOLDER

    try:
        percent = _round_whole(fraction * _HUNDRED)
    except ArithmeticError:
        logger.debug("percentage_out_of_range", value=str(value))
        return PLACEHOLDER

    return f"{percent}%"


def format_money(value: Any, is_external: bool = False) -> str:
    """
    Render a money amount in whole euros.

    Externals are a cost to the business, so their amount is always shown
    negative; employee amounts keep their own sign. Only the leading number
    of a string counts (``"1500 EUR"`` is 1500). Values without one and
    amounts below one cent render as ``"0 EUR"``.

    Examples:
        >>> format_money("1500.6")
        '1501 EUR'
        >>> format_money("1500.6", is_external=True)
        '-1501 EUR'
        >>> format_money("0.004", is_external=True)
        '0 EUR'
    """
    amount = parse_leading_decimal(value)
    if amount is None or abs(amount) < _MIN_MONEY:
        return ZERO_MONEY

    try:
        rounded = _round_whole(amount)
    except ArithmeticError:
        logger.debug("money_out_of_range", value=str(value))
        return ZERO_MONEY
    if not rounded:
        return ZERO_MONEY

    if is_external:
        return f"-{abs(rounded)} {CURRENCY}"
    return f"{rounded} {CURRENCY}"
