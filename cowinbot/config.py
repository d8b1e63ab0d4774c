from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Sequence

from dotenv import load_dotenv

__version__ = "1.0.0"

DEFAULT_DISTRICT_ID = "188"

BOT_USERNAME = "Tux-Sudo CoWin Bot"


@dataclass(frozen=True)
class Settings:
    slack_hook: str
    slack_main_channel: str
    slack_debug_channel: str

    district_id: str = DEFAULT_DISTRICT_ID
    age_18_plus: bool = False
    first_dose_only: bool = False

    # Display name of the webhook messages
    bot_username: str = BOT_USERNAME


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cowinbot",
        description="CowinBot: post available CoWIN vaccination slots of a district to Slack",
    )
    parser.add_argument("-a", "--age-18-plus", action="store_true", help="Only sessions open to 18+")
    parser.add_argument(
        "-f",
        "--first-dose-only",
        action="store_true",
        help="Only sessions with enough first-dose capacity",
    )
    parser.add_argument("-d", "--district-id", help=f"District to check (default: {DEFAULT_DISTRICT_ID})")
    parser.add_argument("--slack-hook", help="Slack incoming webhook URL")
    parser.add_argument("--slack-main-channel", help="Channel for slot messages")
    parser.add_argument("--slack-debug-channel", help="Channel for the run summary")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _require(value: str | None, flag: str, env_name: str) -> str:
    if not value:
        raise RuntimeError(f"Missing required setting: {flag} (or {env_name})")
    return value


def load_settings(argv: Sequence[str] | None = None, dotenv_path: str | None = None) -> Settings:
    # Command line flags win over the environment; dotenv never overrides existing env vars.
    load_dotenv(dotenv_path=dotenv_path, override=False)
    args = build_parser().parse_args(argv)

    district_id = (args.district_id or os.getenv("DISTRICT_ID", DEFAULT_DISTRICT_ID)).strip()

    return Settings(
        slack_hook=_require(args.slack_hook or os.getenv("SLACK_HOOK"), "--slack-hook", "SLACK_HOOK"),
        slack_main_channel=_require(
            args.slack_main_channel or os.getenv("SLACK_MAIN_CHANNEL"),
            "--slack-main-channel",
            "SLACK_MAIN_CHANNEL",
        ),
        slack_debug_channel=_require(
            args.slack_debug_channel or os.getenv("SLACK_DEBUG_CHANNEL"),
            "--slack-debug-channel",
            "SLACK_DEBUG_CHANNEL",
        ),
        district_id=_require(district_id, "--district-id", "DISTRICT_ID"),
        age_18_plus=args.age_18_plus or _env_flag("AGE_18_PLUS"),
        first_dose_only=args.first_dose_only or _env_flag("FIRST_DOSE_ONLY"),
    )
