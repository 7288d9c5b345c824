from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from motorent.models import RentPlan
from motorent.pricing import (
    DailyRateStrategy, ReturnPenaltyStrategy, PromotionalStrategy, get_strategy, RENT_PLANS
)


def make_rent(days, daily_rate, start=date(2024, 5, 1)):
    plan = RentPlan(days, daily_rate)
    return SimpleNamespace(
        plan=plan, start_date=start, delivery_forecast_date=start + timedelta(days=days)
    )


def at(year, month, day):
    return datetime(year, month, day, 10, tzinfo=timezone.utc)


class TestRentPlans:

    def test_plans(self):
        assert [(plan.days, plan.daily_rate) for plan in RENT_PLANS] == [
            (7, 3000), (15, 2800), (30, 2200), (45, 2000), (50, 1800)
        ]

    def test_total(self):
        assert RentPlan(7, 3000).total == 21000


class TestReturnPenaltyStrategy:

    @pytest.mark.parametrize(("days", "rate", "returned", "cost", "used"), [
        (7, 3000, at(2024, 5, 8), 21000, 7),
        (7, 3000, at(2024, 5, 5), 4 * 3000 + 1800, 4),
        (15, 2800, at(2024, 5, 11), 10 * 2800 + 5600, 10),
        (30, 2200, at(2024, 5, 11), 10 * 2200, 10),
        (7, 3000, at(2024, 5, 10), 21000 + 2 * 5000, 9),
    ])
    async def test_calculate_cost(self, days, rate, returned, cost, used):
        result = await ReturnPenaltyStrategy().calculate_cost(make_rent(days, rate), returned)
        assert result.total_cost == cost
        assert result.total_days_used == used

    async def test_returned_before_start(self):
        """Assert that a return before the start counts as no days used."""
        result = await ReturnPenaltyStrategy().calculate_cost(make_rent(7, 3000), at(2024, 4, 29))
        assert result.total_days_used == 0
        assert result.total_cost == round(7 * 3000 * 0.2)


class TestDailyRateStrategy:

    async def test_charges_days_used(self):
        result = await DailyRateStrategy().calculate_cost(make_rent(7, 3000), at(2024, 5, 10))
        assert result == (9 * 3000, 9)

    async def test_charges_at_least_a_day(self):
        result = await DailyRateStrategy().calculate_cost(make_rent(7, 3000), at(2024, 5, 1))
        assert result == (3000, 0)


class TestPromotionalStrategy:

    async def test_discount(self):
        strategy = PromotionalStrategy(ReturnPenaltyStrategy(), 0.1)
        result = await strategy.calculate_cost(make_rent(7, 3000), at(2024, 5, 8))
        assert result.total_cost == 18900
        assert result.total_days_used == 7

    @pytest.mark.parametrize("discount", [-0.1, 1, 1.5])
    def test_invalid_discount(self, discount):
        with pytest.raises(ValueError):
            PromotionalStrategy(DailyRateStrategy(), discount)


class TestGetStrategy:

    @pytest.mark.parametrize(("name", "kind"), [
        ("daily", DailyRateStrategy),
        ("penalty", ReturnPenaltyStrategy),
        ("promotional", PromotionalStrategy),
    ])
    def test_get_strategy(self, name, kind):
        assert isinstance(get_strategy(name, discount=0.2), kind)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            get_strategy("free")
