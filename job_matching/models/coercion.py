"""
Input coercion helpers.

Profiles and postings arrive from collaborators as loosely-typed records.
These helpers turn whatever was stored into the shapes the engine expects,
degrading to empty values instead of raising.
"""

import math
from typing import Any, List, Optional

_SCALARS = (str, int, float)


def coerce_text(value: Any) -> Optional[str]:
    """Text field: strings pass through, scalars are stringified, the rest is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return str(value)
    return None


def coerce_text_list(value: Any) -> List[str]:
    """List-of-strings field. A single string becomes a one-element list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (dict, bytes)) or not hasattr(value, "__iter__"):
        return []

    items: List[str] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, _SCALARS):
            continue
        text = coerce_text(item)
        if text is not None:
            items.append(text)
    return items


def coerce_years(value: Any) -> Optional[float]:
    """Years of experience: non-negative float or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        years = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(years) or math.isinf(years):
        return None
    return max(0.0, years)


def coerce_record_list(value: Any) -> List[Any]:
    """List of records (dicts, strings, models). Non-iterables become []."""
    if value is None:
        return []
    if isinstance(value, (str, dict)):
        return [value]
    if isinstance(value, bytes) or not hasattr(value, "__iter__"):
        return []
    return [item for item in value if item is not None]
