from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from cowinbot.clock import today_ist


def test_utc_evening_is_next_day_in_india() -> None:
    # 19:00 UTC is 00:30 IST on the following day.
    assert today_ist(datetime(2021, 5, 9, 19, 0, tzinfo=timezone.utc)) == "10-05-2021"


def test_utc_before_offset_is_same_day() -> None:
    assert today_ist(datetime(2021, 5, 9, 18, 29, tzinfo=timezone.utc)) == "09-05-2021"


def test_host_zone_of_the_instant_does_not_matter() -> None:
    # Same instant as 2021-05-09 19:00 UTC.
    la = datetime(2021, 5, 9, 12, 0, tzinfo=ZoneInfo("America/Los_Angeles"))
    assert today_ist(la) == "10-05-2021"


def test_naive_instant_is_taken_as_utc() -> None:
    assert today_ist(datetime(2021, 12, 31, 20, 0)) == "01-01-2022"


def test_default_is_well_formed() -> None:
    value = today_ist()
    assert datetime.strptime(value, "%d-%m-%Y")
