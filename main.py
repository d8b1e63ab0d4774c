import logging
from typing import Sequence

from cowinbot.config import load_settings
from cowinbot.domain import CowinBotError
from cowinbot.slack_notifier import format_debug_summary
from cowinbot.worker import run_check_once


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    _setup_logging()
    settings = load_settings(argv)

    try:
        slots = run_check_once(settings)
    except CowinBotError as e:
        logging.getLogger(__name__).error("Run failed (%s: %s)", type(e).__name__, e)
        return 1

    print(format_debug_summary(len(slots), settings.district_id))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
