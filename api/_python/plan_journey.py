#!/usr/bin/env python3
"""
Compute a wake-up journey report.

Usage: python3 plan_journey.py <request_file.json>

This script reads journey settings from a JSON file and outputs the
journey report as JSON to stdout. Errors are reported as {"error": ...}
JSON with exit status 0 so callers can always parse stdout.

Request fields:
    current_wake_time   "HH:MM" (required)
    target_wake_time    "HH:MM" (required)
    start_date          ISO datetime (optional)
    timezone            IANA timezone (optional)
    step_minutes        daily step (optional, default 15)
    now                 ISO datetime (optional, defaults to now in timezone)
"""

import json
import logging
import sys
from datetime import datetime

import pytz

from wakeup.config import ADJUSTMENT_MINUTES_PER_DAY
from wakeup.report import build_journey_report, settings_from_dict
from wakeup.time_math import get_current_datetime_in_tz

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING)

    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: plan_journey.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        with open(request_file) as f:
            data = json.load(f)

        settings = settings_from_dict(data)
        if data.get("now"):
            now = datetime.fromisoformat(data["now"])
        else:
            now = get_current_datetime_in_tz(settings.timezone)

        step_minutes = data.get("step_minutes", ADJUSTMENT_MINUTES_PER_DAY)
        print(json.dumps(build_journey_report(settings, now, step_minutes)))

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
    except pytz.UnknownTimeZoneError as e:
        print(json.dumps({"error": f"Unknown timezone: {e}"}))
    except KeyError as e:
        print(json.dumps({"error": f"Missing required field: {e}"}))
    except ValueError as e:
        print(json.dumps({"error": f"Invalid request: {e}"}))
    except Exception as e:
        logger.exception("Journey planning failed")
        print(json.dumps({"error": f"Journey planning failed: {e}"}))


if __name__ == "__main__":
    main()
