"""Numeric parsing for provider payloads.

Quote providers deliver numbers as JSON strings, and percent changes with
a trailing ``%``. All normalization of those fields lives here so that a
change in provider format is a one-place edit.
"""

from decimal import Decimal, InvalidOperation


def parse_decimal(value) -> Decimal:
    """Parse a provider numeric field into a finite Decimal.

    Args:
        value: A string, int, float or Decimal.

    Returns:
        The parsed value.

    Raises:
        ValueError: If the value is missing, blank, non-numeric, NaN or
            infinite.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, float):
        value = repr(value)
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def parse_percent(value) -> Decimal:
    """Parse a percent field such as ``"1.2345%"`` into percentage points.

    A single trailing ``%`` is stripped; its absence is tolerated.

    Raises:
        ValueError: If what remains is not a finite number.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            text = text[:-1]
        return parse_decimal(text)
    return parse_decimal(value)
