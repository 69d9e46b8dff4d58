# quiz_engine/utils/formatting.py
from typing import Optional


def format_time(seconds: Optional[float]) -> str:
    """Formats a duration in seconds as '45s', '2m 30s', '1h 15m'."""
    if seconds is None or seconds < 0:
        return "0s"
    seconds = int(seconds)

    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        minutes, remaining = divmod(seconds, 60)
        return f"{minutes}m {remaining}s" if remaining else f"{minutes}m"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m" if minutes else f"{hours}h"


def round_percentage(value: float, places: int) -> float:
    """Rounds a percentage and normalizes -0.0 to 0.0."""
    rounded = round(value, places)
    return 0.0 if rounded == 0 else rounded
