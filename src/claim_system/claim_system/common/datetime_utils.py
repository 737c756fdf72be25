from __future__ import annotations

from datetime import datetime

from ..core.constants import SUBMITTED_AT_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_submitted(value: datetime) -> str:
    """Format a timestamp as stored in Claim.date_submitted (YYYY-MM-DD HH:MM)."""
    return value.strftime(SUBMITTED_AT_FORMAT)
