from datetime import date
from typing import Optional


def current_date(today: Optional[date] = None) -> str:
    """Today's date as MM/DD/YYYY, the format stored in ``reviewDate``."""
    today = today or date.today()
    return f"{today.month:02d}/{today.day:02d}/{today.year:04d}"
