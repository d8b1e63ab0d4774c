from __future__ import annotations

import logging

import httpx

from cowinbot.clock import today_ist
from cowinbot.domain import DecodeError, DistrictCalendar, FetchError, RequestFailed

logger = logging.getLogger(__name__)

API_BASE = "https://cdn-api.co-vin.in/api/v2/appointment/sessions"

# The CDN rejects requests that don't look like they come from a browser.
DUMMY_BROWSER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:88.0) Gecko/20100101 Firefox/88.0"

_HEADERS = {
    "User-Agent": DUMMY_BROWSER_AGENT,
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}


def build_calendar_url() -> str:
    return f"{API_BASE}/calendarByDistrict"


def _get(client: httpx.Client, url: str, params: dict[str, str]) -> httpx.Response:
    try:
        return client.get(url, params=params, headers=_HEADERS)
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to reach {url} ({type(e).__name__}: {e})") from e


def fetch_district_calendar(
    district_id: str,
    *,
    date: str | None = None,
    client: httpx.Client | None = None,
    timeout_seconds: float = 20.0,
) -> DistrictCalendar:
    """Fetch the session calendar of ``district_id`` starting at ``date`` (today in IST by default)."""
    url = build_calendar_url()
    params = {"district_id": district_id, "date": date or today_ist()}
    logger.info("Fetching calendar: %s district_id=%s date=%s", url, params["district_id"], params["date"])

    if client is None:
        with httpx.Client(timeout=timeout_seconds) as own_client:
            r = _get(own_client, url, params)
    else:
        r = _get(client, url, params)

    if r.status_code != 200:
        raise RequestFailed(r.status_code)

    try:
        data = r.json()
    except ValueError as e:
        raise DecodeError(f"Calendar response is not valid JSON ({e})") from e

    calendar = DistrictCalendar.from_json(data)
    logger.info("Calendar has %d centers", len(calendar.centers))
    return calendar
