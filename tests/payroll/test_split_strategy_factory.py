from src.payroll_system.payroll_system.payroll.factory import HoursSplitStrategyFactory
from src.payroll_system.payroll_system.payroll.model import DayInput
from src.payroll_system.payroll_system.payroll.settings import EmployeeSettings, OvertimeTier
from src.payroll_system.payroll_system.payroll.strategies.base import distribute_overtime
from src.payroll_system.payroll_system.payroll.strategies.forced_overtime_strategy import ForcedOvertimeSplitStrategy
from src.payroll_system.payroll_system.payroll.strategies.normal_strategy import NormalSplitStrategy
from src.payroll_system.payroll_system.payroll.strategies.regular_only_strategy import RegularOnlySplitStrategy


def test_factory_picks_normal_split_when_overtime_enabled():
    factory = HoursSplitStrategyFactory()
    strategy = factory.for_day(day=DayInput(is_working=True), settings=EmployeeSettings(base_hourly_rate=100))

    assert isinstance(strategy, NormalSplitStrategy)


def test_factory_picks_regular_only_when_overtime_disabled():
    factory = HoursSplitStrategyFactory()
    settings = EmployeeSettings(base_hourly_rate=100, uses_overtime=False)
    strategy = factory.for_day(day=DayInput(is_working=True), settings=settings)

    assert isinstance(strategy, RegularOnlySplitStrategy)


def test_factory_picks_forced_split_for_force_overtime_days():
    factory = HoursSplitStrategyFactory()
    strategy = factory.for_day(
        day=DayInput(is_working=True, force_overtime=True),
        settings=EmployeeSettings(base_hourly_rate=100, uses_overtime=False),
    )

    assert isinstance(strategy, ForcedOvertimeSplitStrategy)


def test_forced_split_honours_prior_regular_allowance():
    settings = EmployeeSettings(base_hourly_rate=100)
    split = ForcedOvertimeSplitStrategy(prior_regular_minutes=120).split(
        total_minutes=300, hours_worked=5, settings=settings
    )

    assert split.regular_hours == 2
    assert split.tier_hours == (2, 1)


def test_distribute_overtime_fills_tiers_in_order():
    tiers = [
        OvertimeTier(capacity_hours=1, multiplier=1.25),
        OvertimeTier(capacity_hours=2, multiplier=1.5),
        OvertimeTier(capacity_hours=None, multiplier=2),
    ]

    assert distribute_overtime(0.5, tiers) == (0.5, 0, 0)
    assert distribute_overtime(2.5, tiers) == (1, 1.5, 0)
    assert distribute_overtime(6, tiers) == (1, 2, 3)


def test_settings_expose_two_tiers():
    settings = EmployeeSettings(base_hourly_rate=100, overtime_tier1_hours=3, overtime_tier1_rate=1.5, overtime_tier2_rate=2)

    assert settings.overtime_tiers() == [
        OvertimeTier(capacity_hours=3, multiplier=1.5),
        OvertimeTier(capacity_hours=None, multiplier=2),
    ]


def test_settings_from_record_fills_defaults():
    settings = EmployeeSettings.from_record({"base_hourly_rate": "450", "uses_overtime": True, "overtime_tier1_rate": None})

    assert settings.base_hourly_rate == 450
    assert settings.overtime_tier1_rate == 1.5
    assert settings.overtime_tier2_rate == 2.0
    assert settings.overtime_tier1_hours == 2
    assert settings.hours_per_shift == 8
    assert settings.break_hours == 1
    assert settings.min_hours_for_break == 5
    assert settings.currency.value == "MXN"
