from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_CURRENCY, FORCED_OVERTIME_REGULAR_MINUTES
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.factory import HoursSplitStrategyFactory
from .payroll.memory_repository import InMemoryPayrollRepository
from .payroll.service import PayrollService
from .payroll.week import WeekAggregator


@dataclass(frozen=True)
class Container:
    payroll_repo: InMemoryPayrollRepository
    calculator: StandardPayrollCalculator
    week_aggregator: WeekAggregator

    payroll_service: PayrollService


def build_container(
    *,
    forced_overtime_regular_minutes: int = FORCED_OVERTIME_REGULAR_MINUTES,
    default_currency: str = DEFAULT_CURRENCY,
) -> Container:
    payroll_repo = InMemoryPayrollRepository()
    calculator = StandardPayrollCalculator(
        strategy_factory=HoursSplitStrategyFactory(prior_regular_minutes=int(forced_overtime_regular_minutes)),
    )
    week_aggregator = WeekAggregator(calculator=calculator)
    payroll_service = PayrollService(payroll_repo, week_aggregator=week_aggregator, default_currency=default_currency)

    return Container(
        payroll_repo=payroll_repo,
        calculator=calculator,
        week_aggregator=week_aggregator,
        payroll_service=payroll_service,
    )
