from __future__ import annotations

import logging

import httpx

from cowinbot.config import Settings
from cowinbot.cowin_client import fetch_district_calendar
from cowinbot.domain import Slot
from cowinbot.slack_notifier import post_debug_summary, post_slot
from cowinbot.slot_filter import check_viable_slots

logger = logging.getLogger(__name__)


def run_check_once(
    settings: Settings,
    *,
    client: httpx.Client | None = None,
    date: str | None = None,
) -> list[Slot]:
    """Fetch the district calendar, post every viable slot, then post the summary.

    The first failure aborts the run; messages already posted stay posted.
    """
    calendar = fetch_district_calendar(settings.district_id, date=date, client=client)

    slots = check_viable_slots(
        calendar,
        only_18_plus=settings.age_18_plus,
        only_first_dose=settings.first_dose_only,
    )
    logger.info(
        "Viable slots: %d (age_18_plus=%s first_dose_only=%s)",
        len(slots),
        settings.age_18_plus,
        settings.first_dose_only,
    )

    for slot in slots:
        post_slot(settings, slot, client=client)

    post_debug_summary(settings, len(slots), client=client)
    logger.info("Debug summary sent to %s", settings.slack_debug_channel)
    return slots
