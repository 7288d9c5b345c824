"""
Rent Service
------------

Books rents for deliverers, picking the plan that matches the requested dates.
"""

from datetime import date
from typing import List

from motorent import logger
from motorent.models import Rent, RentStatus, LicenseType
from motorent.service.access.paginate import FilterQuery
from motorent.service.clock import Clock, as_date
from motorent.service.errors import BadRequestError


class RentService:

    def __init__(self, rent_repository, deliverer_service, rent_plan_repository, clock: Clock = None):
        self._rent_repository = rent_repository
        self._deliverer_service = deliverer_service
        self._rent_plan_repository = rent_plan_repository
        self._clock = clock or Clock()

    async def renting(self, deliverer_id, start_date: date, end_date: date) -> Rent:
        """
        Books a rent for the deliverer.

        The rent lasts from the start date to the end date, which must
        span exactly as many days as one of the plans.

        :param deliverer_id: The deliverer booking the rent.
        :param start_date: The first day of the rent, which must be after today.
        :param end_date: The day the motorcycle is expected back.
        :raises NotFoundError: If the deliverer does not exist.
        :raises BadRequestError: If the deliverer may not rent, the dates are in the past, or no plan fits.
        """
        deliverer = await self._deliverer_service.find_by_id(deliverer_id)

        if deliverer.driver_license_type not in LicenseType.authorized_types():
            raise BadRequestError("Deliverer is not authorized to rent a motorcycle.")

        start_date, end_date = as_date(start_date), as_date(end_date)
        if start_date <= self._clock.today():
            raise BadRequestError("Reservation dates cannot be today or a past date.")

        plan = await self._rent_plan_repository.find_by((end_date - start_date).days)
        if plan is None:
            raise BadRequestError("No rental plan available for the specified range dates.")

        rent = await self._rent_repository.create({
            "deliverer": deliverer,
            "start_date": start_date,
            "end_date": end_date,
            "delivery_forecast_date": end_date,
            "plan": plan,
            "total_cost": plan.total,
            "status": RentStatus.PROCESSING,
        })

        logger.info("Deliverer %s booked the %s day plan from %s", deliverer_id, plan.days, start_date)
        return rent

    async def paginate(self, search_query: FilterQuery) -> List[Rent]:
        return await self._rent_repository.filter(search_query.filters, search_query.paginate)
