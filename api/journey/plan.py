"""
Vercel Python Function for wake-up journey planning.

This endpoint handles POST requests to /api/journey/plan and returns the
journey report (days needed, next wake time, day-by-day plan, widget data)
for the provided wake times.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import sys
from pathlib import Path
from datetime import datetime

import pytz

# Add the _python directory to the Python path for importing wakeup module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from wakeup.config import ADJUSTMENT_MINUTES_PER_DAY
from wakeup.report import build_journey_report, settings_from_dict
from wakeup.time_math import get_current_datetime_in_tz

logger = logging.getLogger(__name__)

# Validation patterns
TIMEZONE_PATTERN_CHARS = set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_/")
MAX_STEP_MINUTES = 120


def validate_timezone(tz: str) -> bool:
    """Validate IANA timezone format like 'America/Los_Angeles'."""
    if not tz or "/" not in tz:
        return False
    return all(c in TIMEZONE_PATTERN_CHARS for c in tz)


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5:
        return False
    try:
        parts = t.split(":")
        if len(parts) != 2:
            return False
        hour = int(parts[0])
        minute = int(parts[1])
        return 0 <= hour <= 23 and 0 <= minute <= 59
    except (ValueError, IndexError):
        return False


def validate_datetime(dt: str) -> bool:
    """Validate ISO datetime like '2026-01-06T09:45' (offset allowed)."""
    if not isinstance(dt, str):
        return False
    try:
        datetime.fromisoformat(dt)
        return True
    except ValueError:
        return False


def validate_request(data: dict) -> str | None:
    """Validate request data, return error message or None if valid."""
    for field in ["current_wake_time", "target_wake_time"]:
        if field not in data:
            return f"Missing required field: {field}"

    if not validate_time(data["current_wake_time"]):
        return f"Invalid current wake time format: {data['current_wake_time']}"
    if not validate_time(data["target_wake_time"]):
        return f"Invalid target wake time format: {data['target_wake_time']}"

    if "timezone" in data and not validate_timezone(data["timezone"]):
        return f"Invalid timezone format: {data['timezone']}"

    if "is_alarm_enabled" in data and not isinstance(data["is_alarm_enabled"], bool):
        return "is_alarm_enabled must be true or false"

    for field in ["start_date", "now"]:
        if data.get(field) is not None and not validate_datetime(data[field]):
            return f"Invalid {field} format: {data[field]}"

    step_minutes = data.get("step_minutes", ADJUSTMENT_MINUTES_PER_DAY)
    if (
        not isinstance(step_minutes, int)
        or isinstance(step_minutes, bool)
        or not 1 <= step_minutes <= MAX_STEP_MINUTES
    ):
        return f"step_minutes must be a number between 1 and {MAX_STEP_MINUTES}"

    return None


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for journey planning."""
        try:
            content_length = int(self.headers.get("Content-Length", 0))
            body = self.rfile.read(content_length)
            data = json.loads(body)

            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            settings = settings_from_dict(data)
            if data.get("now"):
                now = datetime.fromisoformat(data["now"])
            else:
                now = get_current_datetime_in_tz(settings.timezone)

            report = build_journey_report(
                settings, now, data.get("step_minutes", ADJUSTMENT_MINUTES_PER_DAY)
            )
            self._send_json_response(200, {"journey": report})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except pytz.UnknownTimeZoneError as e:
            self._send_json_response(400, {"error": f"Unknown timezone: {e}"})
        except Exception as e:
            logger.exception("Journey planning failed")
            self._send_json_response(500, {"error": f"Journey planning failed: {str(e)}"})

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
