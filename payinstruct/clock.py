"""Single time source for the pipeline."""

from datetime import date, datetime, timezone


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()
