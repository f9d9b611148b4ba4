"""Tests for the script and HTTP entry points."""

import importlib.util
import io
import json
import sys
from pathlib import Path

import pytest
import time_machine

import plan_journey

HANDLER_PATH = Path(__file__).parent.parent.parent / "journey" / "plan.py"


def load_handler_module():
    spec = importlib.util.spec_from_file_location("journey_plan", HANDLER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_script(monkeypatch, capsys, tmp_path, data) -> dict:
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(data))
    monkeypatch.setattr(sys, "argv", ["plan_journey.py", str(request_file)])
    plan_journey.main()
    return json.loads(capsys.readouterr().out)


BASE_REQUEST = {
    "current_wake_time": "08:00",
    "target_wake_time": "06:00",
    "start_date": "2026-01-01T08:00:00-08:00",
    "timezone": "America/Los_Angeles",
    "now": "2026-01-03T08:30:00-08:00",
}


class TestPlanJourneyScript:
    """JSON in, JSON out."""

    def test_report(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, BASE_REQUEST)

        assert report["daysNeeded"] == 8
        assert report["distanceMinutes"] == 120
        assert report["nextWakeUp"] == "07:45"
        assert report["nextWakeUpDisplay"] == "7:45 AM"
        assert report["nextAlarm"] == "2026-01-04T07:45:00-08:00"
        assert report["targetReached"] is False
        assert report["progress"] == {"daysCompleted": 2, "daysRemaining": 6, "fraction": 0.25}
        assert len(report["plan"]) == 8
        assert report["plan"][0] == {"day": 1, "wakeTime": "08:00", "completed": True}
        assert report["plan"][2]["completed"] is False
        assert report["widget"]["daysRemaining"] == 8

    def test_custom_step(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "step_minutes": 30})
        assert report["daysNeeded"] == 4
        assert report["widget"]["daysRemaining"] == 4

    @time_machine.travel("2026-01-03T16:30:00Z", tick=False)
    def test_defaults_now_to_current_time(self, monkeypatch, capsys, tmp_path):
        request = {k: v for k, v in BASE_REQUEST.items() if k != "now"}
        report = run_script(monkeypatch, capsys, tmp_path, request)
        assert report["progress"]["daysCompleted"] == 2

    @pytest.mark.parametrize("step", [7.5, "30"])
    def test_non_integer_step(self, monkeypatch, capsys, tmp_path, step):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "step_minutes": step})
        assert report["error"].startswith("Invalid request")
        assert "step_minutes" in report["error"]

    def test_string_alarm_flag(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "is_alarm_enabled": "false"})
        assert report["error"].startswith("Invalid request")

    def test_explicit_alarm_flag(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "is_alarm_enabled": False})
        assert report["widget"]["isAlarmEnabled"] is False

    def test_missing_field(self, monkeypatch, capsys, tmp_path):
        request = {k: v for k, v in BASE_REQUEST.items() if k != "target_wake_time"}
        report = run_script(monkeypatch, capsys, tmp_path, request)
        assert "Missing required field" in report["error"]

    def test_malformed_time(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "current_wake_time": "8am"})
        assert report["error"].startswith("Invalid request")

    def test_unknown_timezone(self, monkeypatch, capsys, tmp_path):
        report = run_script(monkeypatch, capsys, tmp_path, {**BASE_REQUEST, "timezone": "Mars/Base"})
        assert report["error"].startswith("Unknown timezone")

    def test_file_not_found(self, monkeypatch, capsys, tmp_path):
        monkeypatch.setattr(sys, "argv", ["plan_journey.py", str(tmp_path / "missing.json")])
        plan_journey.main()
        assert "not found" in json.loads(capsys.readouterr().out)["error"]

    def test_usage(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["plan_journey.py"])
        with pytest.raises(SystemExit) as exc:
            plan_journey.main()
        assert exc.value.code == 1
        assert "Usage" in json.loads(capsys.readouterr().out)["error"]


class TestRequestValidation:
    """validate_request in the HTTP function."""

    @pytest.fixture(scope="class")
    def api(self):
        return load_handler_module()

    def test_valid(self, api):
        assert api.validate_request(dict(BASE_REQUEST)) is None

    def test_minimal(self, api):
        assert api.validate_request({"current_wake_time": "08:00", "target_wake_time": "06:00"}) is None

    def test_missing_field(self, api):
        assert "current_wake_time" in api.validate_request({"target_wake_time": "06:00"})

    @pytest.mark.parametrize("bad", ["24:00", "8:00", "08:60", 800])
    def test_bad_time(self, api, bad):
        assert api.validate_request({**BASE_REQUEST, "current_wake_time": bad}) is not None

    def test_bad_timezone(self, api):
        assert "timezone" in api.validate_request({**BASE_REQUEST, "timezone": "Pacific"})

    def test_bad_start_date(self, api):
        assert "start_date" in api.validate_request({**BASE_REQUEST, "start_date": "yesterday"})

    @pytest.mark.parametrize("flag", ["false", 0, None])
    def test_bad_alarm_flag(self, api, flag):
        assert "is_alarm_enabled" in api.validate_request({**BASE_REQUEST, "is_alarm_enabled": flag})

    @pytest.mark.parametrize("step", [0, -5, 121, True, "15", 7.5])
    def test_bad_step(self, api, step):
        assert "step_minutes" in api.validate_request({**BASE_REQUEST, "step_minutes": step})


class TestHandler:
    """do_POST end to end with an in-memory request."""

    @pytest.fixture(scope="class")
    def api(self):
        return load_handler_module()

    def post(self, api, body: bytes):
        h = api.handler.__new__(api.handler)
        h.headers = {"Content-Length": str(len(body))}
        h.rfile = io.BytesIO(body)
        h.wfile = io.BytesIO()
        statuses = []
        h.send_response = statuses.append
        h.send_header = lambda key, value: None
        h.end_headers = lambda: None
        h.do_POST()
        return statuses[0], json.loads(h.wfile.getvalue())

    def test_ok(self, api):
        status, payload = self.post(api, json.dumps(BASE_REQUEST).encode())
        assert status == 200
        assert payload["journey"]["nextWakeUp"] == "07:45"

    def test_validation_error(self, api):
        status, payload = self.post(api, json.dumps({"target_wake_time": "06:00"}).encode())
        assert status == 400
        assert "Missing required field" in payload["error"]

    def test_invalid_json(self, api):
        status, payload = self.post(api, b"{not json")
        assert status == 400
        assert payload["error"] == "Invalid JSON in request body"

    def test_unknown_timezone(self, api):
        status, payload = self.post(api, json.dumps({**BASE_REQUEST, "timezone": "Mars/Base"}).encode())
        assert status == 400
        assert payload["error"].startswith("Unknown timezone")
