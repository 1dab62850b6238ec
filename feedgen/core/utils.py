"""
Utility functions.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    """
    Convert value to Decimal.

    Floats go through str() so 19.99 stays 19.99 instead of its binary expansion.
    Raises ValueError for values that are not finite numbers.
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def format_decimal(value: Decimal) -> str:
    """
    Render a decimal in its natural form: fixed point, no trailing zeros.

    Decimal("12.0") -> "12", Decimal("0.250") -> "0.25", Decimal("100") -> "100"
    """
    if value == 0:
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def strip_tags(text: str) -> str:
    """
    Remove markup tags from text, keeping the text between them.

    A '<' followed by whitespace is text ("size < 10cm"), not a tag. An
    unterminated tag swallows the rest of the text.
    """
    if not text:
        return ""
    return re.sub(r'<(?!\s)[^>]*(?:>|\Z)', '', text)
