from __future__ import annotations

import logging

import pytest

from src.payroll_system.payroll_system.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def _create_employee(client) -> str:
    resp = client.post("/api/payroll/employees", json={"name": "Luis", "settings": {"base_hourly_rate": 450}})
    assert resp.status_code == 201
    return resp.get_json()["employee"]["id"]


def test_schedule_patch_returns_recomputed_week(client):
    employee_id = _create_employee(client)
    resp = client.post(f"/api/payroll/employees/{employee_id}/weeks", json={"start_date": "2025-03-03"})
    assert resp.status_code == 201
    week_id = resp.get_json()["week"]["id"]

    resp = client.patch(
        f"/api/payroll/employees/{employee_id}/weeks/{week_id}/schedule",
        json={"schedule": {"monday": {"entry_hour": 22, "exit_hour": 6, "is_working": True}}},
    )

    assert resp.status_code == 200
    week = resp.get_json()["week"]
    assert week["schedule"]["monday"]["hours_worked"] == 7
    assert week["schedule"]["monday"]["daily_pay"] == 3150
    assert week["totals"]["total_pay"] == 3150


def test_week_patch_and_stats(client):
    employee_id = _create_employee(client)
    client.post(f"/api/payroll/employees/{employee_id}/weeks", json={"start_date": "2025-03-03"})
    client.patch(
        f"/api/payroll/employees/{employee_id}/weeks/2025-W10/schedule",
        json={"schedule": {"monday": {"entry_hour": 9, "exit_hour": 18, "is_working": True}}},
    )

    resp = client.patch(f"/api/payroll/employees/{employee_id}/weeks/2025-W10", json={"weekly_tips": 200})
    assert resp.get_json()["week"]["totals"]["total_pay"] == 3800

    stats = client.get(f"/api/payroll/employees/{employee_id}/stats").get_json()["stats"]
    assert stats["total_shifts"] == 1
    assert stats["total_pay"] == 3800

    monthly = client.get(f"/api/payroll/employees/{employee_id}/stats/monthly?year=2025&month=3").get_json()
    assert monthly["stats"]["week_count"] == 1
    assert monthly["stats"]["weeks"] == ["2025-W10"]

    empty = client.get(f"/api/payroll/employees/{employee_id}/stats/monthly?year=2025&month=4").get_json()
    assert empty["stats"] is None

    months = client.get(f"/api/payroll/employees/{employee_id}/months").get_json()["months"]
    assert months == [{"year": 2025, "month": 3, "label": "March 2025"}]


def test_errors_are_reported_as_json(client):
    resp = client.get("/api/payroll/employees/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()

    employee_id = _create_employee(client)
    resp = client.post(f"/api/payroll/employees/{employee_id}/weeks", json={"start_date": "yesterday"})
    assert resp.status_code == 422


def test_each_api_request_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="src.payroll_system.payroll_system.payroll.controller")

    client.get("/api/payroll/employees")

    records = [r for r in caplog.records if r.getMessage() == "request"]
    assert records
    assert records[-1].path == "/api/payroll/employees"
    assert records[-1].method == "GET"
    assert records[-1].status_code == 200


def test_string_flags_are_rejected(client):
    resp = client.post("/api/payroll/employees", json={"name": "Luis", "settings": {"uses_overtime": "false"}})

    assert resp.status_code == 422
