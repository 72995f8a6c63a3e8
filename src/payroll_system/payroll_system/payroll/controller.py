from __future__ import annotations

import logging
from dataclasses import asdict
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeStats, MonthlyStats, Week

logger = logging.getLogger(__name__)


def week_to_dict(week: Week) -> dict:
    schedule = {}
    for d in week.ordered_days():
        schedule[d.day.value] = {
            **asdict(d.input),
            **asdict(d.result),
            "date": d.work_date.isoformat() if d.work_date else None,
        }

    return {
        "id": week.week_id,
        "start_date": week.start_date.isoformat(),
        "end_date": week.end_date.isoformat(),
        "weekly_tips": week.weekly_tips,
        "shift_rate": week.shift_rate,
        "schedule": schedule,
        "totals": asdict(week.aggregates),
    }


def employee_to_dict(emp: Employee, *, with_weeks: bool = True) -> dict:
    out = {
        "id": emp.employee_id,
        "name": emp.name,
        "settings": emp.settings.to_dict(),
    }
    if with_weeks:
        out["weeks"] = [week_to_dict(w) for w in emp.weeks]
    return out


def monthly_to_dict(stats: MonthlyStats) -> dict:
    out = asdict(stats)
    out["weeks"] = [w.week_id for w in stats.weeks]
    return out


def stats_to_dict(stats: EmployeeStats) -> dict:
    return asdict(stats)


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.after_request
    def log_request(response):
        if request.path.startswith("/api/payroll"):
            logger.info(
                "request",
                extra={"path": request.path, "method": request.method, "status_code": response.status_code},
            )
        return response

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except ValidationError as e:
                logger.info("request rejected: %s", e, extra={"path": request.path})
                return jsonify({"error": str(e)}), 422

        return wrapper

    def _body() -> dict:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return body

    @app.route("/api/payroll/employees", methods=["GET"], endpoint="payroll_employees")
    @json_errors
    def list_employees():
        return jsonify({"employees": [employee_to_dict(e, with_weeks=False) for e in service.list_employees()]})

    @app.route("/api/payroll/employees", methods=["POST"], endpoint="payroll_employees_create")
    @json_errors
    def create_employee():
        body = _body()
        emp = service.create_employee(name=body.get("name") or "", settings=body.get("settings"))
        return jsonify({"employee": employee_to_dict(emp)}), 201

    @app.route("/api/payroll/employees/<employee_id>", methods=["GET"], endpoint="payroll_employee")
    @json_errors
    def get_employee(employee_id: str):
        return jsonify({"employee": employee_to_dict(service.get_employee(employee_id))})

    @app.route("/api/payroll/employees/<employee_id>", methods=["PATCH"], endpoint="payroll_employee_update")
    @json_errors
    def update_employee(employee_id: str):
        body = _body()
        emp = service.update_employee(employee_id, name=body.get("name"), settings=body.get("settings"))
        return jsonify({"employee": employee_to_dict(emp)})

    @app.route("/api/payroll/employees/<employee_id>", methods=["DELETE"], endpoint="payroll_employee_delete")
    @json_errors
    def delete_employee(employee_id: str):
        service.delete_employee(employee_id)
        return jsonify({"success": True})

    @app.route("/api/payroll/employees/<employee_id>/weeks", methods=["GET"], endpoint="payroll_weeks")
    @json_errors
    def list_weeks(employee_id: str):
        emp = service.get_employee(employee_id)
        return jsonify({"weeks": [week_to_dict(w) for w in emp.weeks]})

    @app.route("/api/payroll/employees/<employee_id>/weeks", methods=["POST"], endpoint="payroll_weeks_create")
    @json_errors
    def create_week(employee_id: str):
        body = _body()
        week = service.create_week(
            employee_id,
            start_date=str(body.get("start_date") or ""),
            weekly_tips=body.get("weekly_tips") or 0,
        )
        return jsonify({"week": week_to_dict(week)}), 201

    @app.route("/api/payroll/employees/<employee_id>/weeks/<week_id>", methods=["PATCH"], endpoint="payroll_week_update")
    @json_errors
    def update_week(employee_id: str, week_id: str):
        body = _body()
        changes = {k: body[k] for k in ("weekly_tips", "shift_rate") if k in body}
        week = service.update_week(employee_id, week_id, **changes)
        return jsonify({"week": week_to_dict(week)})

    @app.route("/api/payroll/employees/<employee_id>/weeks/<week_id>", methods=["DELETE"], endpoint="payroll_week_delete")
    @json_errors
    def delete_week(employee_id: str, week_id: str):
        service.delete_week(employee_id, week_id)
        return jsonify({"success": True})

    @app.route(
        "/api/payroll/employees/<employee_id>/weeks/<week_id>/schedule",
        methods=["PATCH"],
        endpoint="payroll_week_schedule",
    )
    @json_errors
    def update_schedule(employee_id: str, week_id: str):
        schedule = _body().get("schedule")
        if not isinstance(schedule, dict):
            raise ValidationError("schedule must be an object keyed by weekday")
        week = service.update_schedule(employee_id, week_id, schedule)
        return jsonify({"week": week_to_dict(week)})

    @app.route("/api/payroll/employees/<employee_id>/stats", methods=["GET"], endpoint="payroll_employee_stats")
    @json_errors
    def employee_stats(employee_id: str):
        return jsonify({"stats": stats_to_dict(service.employee_stats(employee_id))})

    @app.route("/api/payroll/employees/<employee_id>/stats/monthly", methods=["GET"], endpoint="payroll_monthly_stats")
    @json_errors
    def monthly_stats(employee_id: str):
        stats = service.monthly_stats(
            employee_id,
            year=request.args.get("year", ""),
            month=request.args.get("month", ""),
        )
        return jsonify({"stats": monthly_to_dict(stats) if stats else None})

    @app.route("/api/payroll/employees/<employee_id>/months", methods=["GET"], endpoint="payroll_available_months")
    @json_errors
    def available_months(employee_id: str):
        months = service.available_months(employee_id)
        return jsonify({"months": [{"year": m.year, "month": m.month, "label": m.label} for m in months]})
