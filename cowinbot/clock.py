from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

IST_ZONE = ZoneInfo("Asia/Kolkata")

# Date format expected by the CoWIN calendar endpoints.
API_DATE_FORMAT = "%d-%m-%Y"


def today_ist(now: datetime | None = None) -> str:
    """Return the civil date in India for ``now`` (default: the current instant).

    A naive ``now`` is taken as UTC so the result never depends on the host timezone.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(IST_ZONE).strftime(API_DATE_FORMAT)
