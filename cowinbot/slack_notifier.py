from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import httpx

from cowinbot.config import Settings
from cowinbot.domain import NotifyError, Slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlackPayload:
    channel: str
    text: str
    username: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def format_slot(slot: Slot) -> str:
    return "\n".join(
        [
            ":large_green_circle: [Vaccine Slot]",
            f"Date: {slot.date},",
            f"Center: {slot.center},",
            f"Address: {slot.address},",
            f"Vaccine: {slot.vaccine},",
            f"Available Capacity: {slot.available_capacity},",
            f"1st Dose Capacity: {slot.available_capacity_dose1},",
            f"2nd Dose Capacity: {slot.available_capacity_dose2},",
            f"Min Age Limit: {slot.min_age_limit},",
        ]
    )


def format_debug_summary(count: int, district_id: str) -> str:
    return f"Found {count} viable slots for District ID: {district_id}"


def _post(client: httpx.Client, hook_url: str, payload: SlackPayload) -> None:
    try:
        r = client.post(hook_url, json=payload.as_dict())
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise NotifyError(
            f"Webhook rejected message to {payload.channel}: {e.response.status_code} {e.response.text.strip()}"
        ) from e
    except httpx.HTTPError as e:
        raise NotifyError(f"Failed to reach webhook ({type(e).__name__}: {e})") from e


def send_slack_message(
    *,
    hook_url: str,
    payload: SlackPayload,
    client: httpx.Client | None = None,
    timeout_seconds: float = 20.0,
) -> None:
    if client is None:
        with httpx.Client(timeout=timeout_seconds) as own_client:
            _post(own_client, hook_url, payload)
    else:
        _post(client, hook_url, payload)


def post_slot(settings: Settings, slot: Slot, *, client: httpx.Client | None = None) -> None:
    payload = SlackPayload(
        channel=settings.slack_main_channel,
        text=format_slot(slot),
        username=settings.bot_username,
    )
    send_slack_message(hook_url=settings.slack_hook, payload=payload, client=client)
    logger.info("Posted slot %s at %s to %s", slot.date, slot.center, settings.slack_main_channel)


def post_debug_summary(settings: Settings, count: int, *, client: httpx.Client | None = None) -> None:
    payload = SlackPayload(
        channel=settings.slack_debug_channel,
        text=format_debug_summary(count, settings.district_id),
        username=settings.bot_username,
    )
    send_slack_message(hook_url=settings.slack_hook, payload=payload, client=client)
