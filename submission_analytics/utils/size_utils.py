"""
Attachment size helpers.

Submission exports report attachment sizes either as raw byte counts or as
human-readable text ("3.2MB", "500 bytes", "1,024"). These helpers convert
between the two representations.
"""

import math
import re
from typing import Optional, Union

# Powers of 1024 for each accepted unit; a bare "b" is plain bytes
UNIT_FACTORS = {
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
    "t": 1024**4,
    "tb": 1024**4,
}

BYTE_UNITS = ["B", "KB", "MB", "GB", "TB"]

_DIGITS_ONLY = re.compile(r"^\d+$")
_NUMBER_WITH_UNIT = re.compile(r"([\d.]+)\s*([kmgt]?b|[kmgt])\b", re.IGNORECASE | re.ASCII)
_NUMBER_BYTES = re.compile(r"^([\d.]+)\s*bytes?$", re.IGNORECASE)
_LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _parse_leading_float(text: str) -> Optional[float]:
    """Parse the numeric prefix of a run of digits and dots ("1.5.2" -> 1.5)."""
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_size_to_bytes(value: Union[int, float, str, None]) -> Optional[float]:
    """
    Convert an attachment size to a byte count.

    Numbers are taken as bytes. Text is trimmed and stripped of thousands
    separators, then read as plain digits, as a number with a unit
    (b/kb/mb/gb/tb or k/m/g/t, case-insensitive, optional space) or as
    "<number> byte(s)".

    Args:
        value: Raw size value from the attachment

    Returns:
        Optional[float]: Byte count, or None if the size cannot be parsed
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    raw = value.strip().replace(",", "")
    if not raw:
        return None

    if _DIGITS_ONLY.match(raw):
        return int(raw)

    match = _NUMBER_WITH_UNIT.search(raw)
    if not match:
        bytes_match = _NUMBER_BYTES.match(raw)
        if not bytes_match:
            return None
        return _parse_leading_float(bytes_match.group(1))

    number = _parse_leading_float(match.group(1))
    if number is None:
        return None
    return number * UNIT_FACTORS.get(match.group(2).lower(), 1)


def format_bytes(size: float) -> str:
    """
    Format a byte count for display ("1.50 KB", "20.0 MB").

    Args:
        size: Byte count

    Returns:
        str: Formatted size, "0 B" for non-positive or non-finite input
    """
    if not math.isfinite(size) or size <= 0:
        return "0 B"

    idx = 0
    while size >= 1024 and idx < len(BYTE_UNITS) - 1:
        size /= 1024
        idx += 1

    decimals = 2 if size < 10 and idx > 0 else 1
    return f"{size:.{decimals}f} {BYTE_UNITS[idx]}"


def format_percent(rate: float) -> str:
    """Format a 0-1 rate as a percentage with one decimal."""
    return f"{rate * 100:.1f}%"
