from __future__ import annotations

import re
from datetime import date
from typing import Optional

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date(value: Optional[date] = None) -> str:
    """Formats a date as 'Month D, YYYY' (today when omitted)."""
    value = value or date.today()
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def truncate_str(text: Optional[str], word_limit: int) -> str:
    """Keeps the first ``word_limit`` words and appends '...' if anything was cut."""
    if not text:
        return ""

    words = re.split(r"\s+", text)
    if len(words) <= word_limit:
        return text

    return " ".join(words[:word_limit]) + "..."
