"""
Rent Lifecycle
--------------

Moves a rent from booked, to out on the road, to returned.
"""

from datetime import date

from motorent import logger
from motorent.models import Rent, RentStatus
from motorent.service.access.motorcycles import get_motorcycle
from motorent.service.clock import Clock, as_date
from motorent.service.errors import BadRequestError, NotFoundError
from motorent.service.rent_budget_service import RentBudget, RentBudgetService


class RentLifecycle:

    def __init__(self, rent_repository, budget_service: RentBudgetService, clock: Clock = None):
        self._rent_repository = rent_repository
        self._budget_service = budget_service
        self._clock = clock or Clock()

    async def pickup(self, rent: Rent, plate: str) -> Rent:
        """
        Hands the motorcycle with the given plate over to the rent.

        :raises BadRequestError: If the rent was already picked up, has not started, or the motorcycle is out.
        :raises NotFoundError: If there is no motorcycle with that plate.
        """
        if rent.status != RentStatus.PROCESSING:
            raise BadRequestError("Only rents that are still processing can be picked up.")

        if self._clock.today() < rent.start_date:
            raise BadRequestError(f"The rent starts on {rent.start_date.isoformat()} and cannot be picked up before.")

        motorcycle = await get_motorcycle(plate=plate)
        if motorcycle is None:
            raise NotFoundError("Motorcycle not found")

        if await self._rent_repository.is_rented(motorcycle):
            raise BadRequestError("Motorcycle is currently rented.")

        rent = await self._rent_repository.mark_rented(rent, motorcycle)
        logger.info("Rent %s picked up motorcycle %s", rent.id, motorcycle.plate)
        return rent

    async def return_motorcycle(self, deliverer_id, plate: str, delivery_date: date) -> RentBudget:
        """
        Closes the deliverer's current rent of the motorcycle, charging the quoted budget.

        The delivery date must fall between the start of the rent and today.

        :raises NotFoundError: If the deliverer has no active rent on that plate.
        :raises BadRequestError: If the delivery date is before the rent started or in the future.
        """
        budget = await self._budget_service.expected_return(deliverer_id, plate, delivery_date)
        delivered = as_date(delivery_date)

        if delivered < budget.rent.start_date:
            raise BadRequestError(
                f"The rent started on {budget.rent.start_date.isoformat()} and cannot be returned before."
            )
        if delivered > self._clock.today():
            raise BadRequestError("A motorcycle cannot be returned at a future date.")

        await self._rent_repository.mark_returned(budget.rent, delivered, budget.total_cost)
        logger.info("Rent %s returned, charged %s", budget.rent.id, budget.total_cost)
        return budget
