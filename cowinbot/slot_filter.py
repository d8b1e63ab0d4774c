from __future__ import annotations

from cowinbot.domain import DistrictCalendar, Slot

MAX_AGE_LIMIT_18_PLUS = 18

# Fewer first-dose doses than this is not worth a notification.
MIN_FIRST_DOSE_CAPACITY = 5


def check_viable_slots(
    calendar: DistrictCalendar,
    *,
    only_18_plus: bool,
    only_first_dose: bool,
) -> list[Slot]:
    """Flatten the calendar into slots that have capacity and match the flags.

    Order follows the calendar: centers first, then their sessions.
    """
    slots: list[Slot] = []
    for center in calendar.centers:
        for session in center.sessions:
            if only_18_plus and session.min_age_limit > MAX_AGE_LIMIT_18_PLUS:
                continue
            if only_first_dose and session.available_capacity_dose1 < MIN_FIRST_DOSE_CAPACITY:
                continue
            if session.available_capacity <= 0:
                continue
            slots.append(
                Slot(
                    center=center.name,
                    address=center.address,
                    date=session.date,
                    vaccine=session.vaccine,
                    available_capacity=session.available_capacity,
                    available_capacity_dose1=session.available_capacity_dose1,
                    available_capacity_dose2=session.available_capacity_dose2,
                    min_age_limit=session.min_age_limit,
                )
            )
    return slots
