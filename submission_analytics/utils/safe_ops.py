"""
Utility functions for handling None values and loosely typed data.

This module provides functions to safely handle operations on potentially
None or malformed values, especially timestamps coming from exported
assignment data and divisions with empty denominators.
"""

import json
import math
from datetime import datetime, tzinfo
from typing import Optional, Any


def safe_str(value: Any) -> str:
    """
    Safely convert any value to a string, handling None values.

    Args:
        value: Any value that might be None

    Returns:
        A string representation or empty string if None
    """
    if value is None:
        return ""
    return str(value)


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide two numbers, returning 0.0 when the denominator is zero.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        float: numerator / denominator, or 0.0 for an empty denominator
    """
    if not denominator:
        return 0.0
    return numerator / denominator


def standardize_datetime(
    dt: Optional[datetime], tz: Optional[tzinfo] = None
) -> Optional[datetime]:
    """
    Standardize a datetime object to be timezone-naive wall-clock time.

    If the datetime is timezone-aware, convert it to ``tz`` (the local zone
    when ``tz`` is None) and drop the timezone info. Naive datetimes are
    returned as is.

    Args:
        dt: A datetime object or None
        tz: Target timezone for aware datetimes

    Returns:
        datetime: A timezone-naive datetime or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is not None:
        return dt.astimezone(tz).replace(tzinfo=None)

    return dt


def safe_parse_datetime(
    date_input: Any, tz: Optional[tzinfo] = None
) -> Optional[datetime]:
    """
    Parse a timestamp from the formats found in exported assignment data.

    Args:
        date_input: The date to parse, can be one of:
            - datetime object
            - integer or float (epoch time in milliseconds)
            - string of digits (epoch time in milliseconds)
            - dict with $date key containing an ISO format date string
            - string in ISO format (a trailing 'Z' is accepted)
            - JSON string containing a $date object
        tz: Target timezone for aware values, see standardize_datetime

    Returns:
        A naive datetime, or None if the input is missing or unrecognized
    """
    if date_input is None or isinstance(date_input, bool):
        return None

    if isinstance(date_input, datetime):
        return standardize_datetime(date_input, tz)

    # Epoch time in milliseconds
    if isinstance(date_input, (int, float)) or (
        isinstance(date_input, str) and date_input.strip().isdigit()
    ):
        try:
            epoch_ms = float(date_input)
            if not math.isfinite(epoch_ms):
                return None
            return datetime.fromtimestamp(epoch_ms / 1000.0, tz).replace(tzinfo=None)
        except (ValueError, OverflowError, OSError):
            return None

    # Object with $date key
    if isinstance(date_input, dict):
        if "$date" in date_input:
            return safe_parse_datetime(date_input["$date"], tz)
        return None

    if isinstance(date_input, str):
        text = date_input.strip()
        if not text:
            return None

        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
            return standardize_datetime(dt, tz)
        except ValueError:
            pass

        # JSON string that contains a date object
        try:
            parsed_json = json.loads(text)
        except (json.JSONDecodeError, TypeError):
            return None
        if isinstance(parsed_json, dict):
            return safe_parse_datetime(parsed_json, tz)

    return None
