from datetime import date, datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from motorent.models import RentPlan
from motorent.pricing import CostResult, ReturnPenaltyStrategy
from motorent.service import RentBudgetService
from motorent.service.errors import NotFoundError


@pytest.fixture
def rent():
    return SimpleNamespace(
        id=3, plan=RentPlan(7, 3000), start_date=date(2024, 5, 1), delivery_forecast_date=date(2024, 5, 8)
    )


@pytest.fixture
def rent_repository(rent):
    repository = AsyncMock()
    repository.find_rented_by_plate.return_value = rent
    return repository


async def test_expected_return(rent_repository, rent):
    strategy = AsyncMock()
    strategy.calculate_cost.return_value = CostResult(12345, 4)
    service = RentBudgetService(rent_repository, strategy)

    budget = await service.expected_return(1, "MOT0001", date(2024, 5, 5))

    assert budget.total_cost == 12345
    assert budget.total_days_used == 4
    assert budget.rent is rent
    rent_repository.find_rented_by_plate.assert_awaited_once_with(1, "MOT0001")
    strategy.calculate_cost.assert_awaited_once_with(rent, datetime(2024, 5, 5, tzinfo=timezone.utc))


async def test_expected_return_with_penalty(rent_repository):
    service = RentBudgetService(rent_repository, ReturnPenaltyStrategy())

    budget = await service.expected_return(1, "MOT0001", date(2024, 5, 10))

    assert budget.total_cost == 31000
    assert budget.total_days_used == 9


async def test_no_active_rent(rent_repository):
    rent_repository.find_rented_by_plate.return_value = None
    strategy = AsyncMock()
    service = RentBudgetService(rent_repository, strategy)

    with pytest.raises(NotFoundError) as error:
        await service.expected_return(1, "MOT0001", date(2024, 5, 5))

    assert error.value.message == "Rent not found"
    strategy.calculate_cost.assert_not_called()


async def test_repository_error(rent_repository):
    error = RuntimeError("connection lost")
    rent_repository.find_rented_by_plate.side_effect = error
    strategy = AsyncMock()
    service = RentBudgetService(rent_repository, strategy)

    with pytest.raises(RuntimeError) as excinfo:
        await service.expected_return(1, "MOT0001", date(2024, 5, 5))

    assert excinfo.value is error
    strategy.calculate_cost.assert_not_called()


async def test_strategy_error(rent_repository):
    error = RuntimeError("pricing failed")
    strategy = AsyncMock()
    strategy.calculate_cost.side_effect = error
    service = RentBudgetService(rent_repository, strategy)

    with pytest.raises(RuntimeError) as excinfo:
        await service.expected_return(1, "MOT0001", date(2024, 5, 5))

    assert excinfo.value is error
