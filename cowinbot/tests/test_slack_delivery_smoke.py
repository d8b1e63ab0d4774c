"""Smoke/integration test for Slack webhook delivery.

This test posts to a real Slack webhook and is skipped unless configured:
    SLACK_HOOK
    SLACK_MAIN_CHANNEL

Run:
SLACK_HOOK=https://hooks.slack.com/... SLACK_MAIN_CHANNEL=#test python -m pytest -q -m slack
"""

from __future__ import annotations

import os

import pytest

from cowinbot.config import BOT_USERNAME
from cowinbot.slack_notifier import SlackPayload, send_slack_message

pytestmark = pytest.mark.slack


@pytest.mark.skipif(
    not os.getenv("SLACK_HOOK") or not os.getenv("SLACK_MAIN_CHANNEL"),
    reason="Set SLACK_HOOK and SLACK_MAIN_CHANNEL to run Slack smoke test",
)
def test_slack_message_delivery_smoke() -> None:
    send_slack_message(
        hook_url=os.environ["SLACK_HOOK"],
        payload=SlackPayload(
            channel=os.environ["SLACK_MAIN_CHANNEL"],
            text="CowinBot: Slack smoke test (pytest)",
            username=BOT_USERNAME,
        ),
    )
