"""
Rent Budget Service
-------------------

Quotes what a deliverer would pay to hand a motorcycle back on a given date.
"""

from datetime import date
from typing import NamedTuple

from motorent.models import Rent
from motorent.pricing import PaymentCalculationStrategy
from motorent.service.clock import as_datetime
from motorent.service.errors import NotFoundError


class RentBudget(NamedTuple):
    total_cost: int
    total_days_used: int
    rent: Rent


class RentBudgetService:

    def __init__(self, rent_repository, payment_strategy: PaymentCalculationStrategy):
        self._rent_repository = rent_repository
        self._payment_strategy = payment_strategy

    async def expected_return(self, deliverer_id, plate: str, delivery_date: date) -> RentBudget:
        """
        Prices the deliverer's current rent of the motorcycle as if it were returned on the given date.

        :raises NotFoundError: If the deliverer has no active rent on that plate.
        """
        rent = await self._rent_repository.find_rented_by_plate(deliverer_id, plate)
        if rent is None:
            raise NotFoundError("Rent not found")

        result = await self._payment_strategy.calculate_cost(rent, as_datetime(delivery_date))
        return RentBudget(result.total_cost, result.total_days_used, rent)
