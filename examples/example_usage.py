"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the payroll rules live in calculators and services.
"""

from src.payroll_system.payroll_system.container import build_container


def main():
    container = build_container()
    service = container.payroll_service

    emp = service.create_employee(name="Ana", settings={"base_hourly_rate": 450})
    service.create_week(emp.employee_id, start_date="2025-03-03", weekly_tips=200)
    week = service.update_schedule(
        emp.employee_id,
        "2025-W10",
        {
            "monday": {"entry_hour": 9, "exit_hour": 20, "is_working": True},
            "tuesday": {"entry_hour": 22, "exit_hour": 6, "is_working": True},
        },
    )

    for day in week.ordered_days():
        print(day.day.value, day.result)
    print(week.aggregates)
    print(service.employee_stats(emp.employee_id))


if __name__ == "__main__":
    main()
