"""
Helper Functions for the Respire Intervention Simulator
Utility functions used across the application
"""

import math
from datetime import datetime, timezone
from utils.constants import AQI_BREAKPOINTS, REPORT_DATE_FORMAT, RISK_LEVELS


def get_risk_category_key(aqi: float) -> str:
    """
    Get category key for looking up messages

    Args:
        aqi: Air Quality Index value

    Returns:
        Category key (e.g., "good", "unhealthy")
    """
    for key, bounds in AQI_BREAKPOINTS.items():
        if aqi <= bounds["max"]:
            return key
    return "hazardous"


def classify_aqi(aqi: float) -> str:
    """
    Classify AQI into risk category

    Args:
        aqi: Air Quality Index value

    Returns:
        Risk level string (e.g., "Good", "Unhealthy")
    """
    return RISK_LEVELS[get_risk_category_key(aqi)]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def utc_now() -> datetime:
    """Timezone-aware current time in UTC"""
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime, format: str = "iso") -> str:
    """
    Format datetime for API responses and reports

    Args:
        dt: Datetime object
        format: Format type (iso/date)

    Returns:
        Formatted string
    """
    if format == "iso":
        return dt.isoformat()
    elif format == "date":
        return dt.strftime(REPORT_DATE_FORMAT)
    else:
        return str(dt)


def format_thousands(value: int) -> str:
    """10000 -> '10,000'"""
    return f"{value:,}"

