"""
Amount parsing for free-text ingredient quantities.
"""
import math
import re
from functools import reduce
from typing import NamedTuple

from src.utils.units import normalize_unit

_AMOUNT_PATTERN = re.compile(r'^\s*([\d./]+)\s*(fl\.?\s*oz\b|[a-zA-Z]+)?')


class Amount(NamedTuple):
    """Numeric quantity with its canonical unit."""
    value: float
    unit: str


def _to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return math.nan


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


def parse_number(token: str) -> float:
    """
    Convert a numeric token to a float, reducing fractions left to right.

    "1/2/3" is read as (1/2)/3. Malformed tokens return NaN.
    """
    if '/' in token:
        return reduce(_divide, (_to_number(part) for part in token.split('/')))
    return _to_number(token)


def parse_amount(text: str) -> Amount:
    """
    Parse a leading quantity and optional unit from an amount phrase.

    Never raises: anything unparsable degrades to a quantity of 1.

    Args:
        text: Amount phrase (e.g. "1/2 cup", "200g", "a pinch")

    Returns:
        Amount with the numeric value and canonical unit

    Example:
        >>> parse_amount("2 tbsp")
        Amount(value=2.0, unit='tablespoons')
        >>> parse_amount("to taste")
        Amount(value=1, unit='')
    """
    match = _AMOUNT_PATTERN.match(text or '')
    if not match:
        return Amount(1, '')

    value = parse_number(match.group(1))
    if math.isnan(value):
        value = 1
    return Amount(value, normalize_unit(match.group(2) or ''))


def format_decimal(value: float) -> str:
    """Format an amount with exactly two decimals, e.g. "2.00"."""
    return f"{value:.2f}"


def format_amount(value: float) -> str:
    """Format an amount with at most two decimals and no trailing zeros."""
    return format_decimal(value).rstrip('0').rstrip('.')
