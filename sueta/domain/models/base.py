"""Shared helpers for stored documents."""

from datetime import datetime, timezone

DATE_FORMAT = "%Y/%m/%d"


def utc_date() -> str:
    """Current UTC calendar date as ``YYYY/MM/DD``."""
    return datetime.now(timezone.utc).strftime(DATE_FORMAT)
