"""
Rents
-----
"""
from datetime import date
from typing import Optional, List, Dict, Any

from motorent.models import Rent, Motorcycle, RentStatus
from motorent.service.access.paginate import Paginate, build_paginate


class RentRepository:

    async def create(self, rent_input: Dict[str, Any]) -> Rent:
        """
        Stores a new rent.

        :param rent_input: The rent's fields, with the plan given as a :class:`~motorent.models.RentPlan`.
        """
        data = dict(rent_input)
        plan = data.pop("plan")
        return await Rent.create(plan_days=plan.days, plan_daily_rate=plan.daily_rate, **data)

    async def filter(self, filters: Optional[Dict[str, Any]], paginate: Paginate) -> List[Rent]:
        """Gets a page of the rents matching the filters."""
        query = Rent.filter(**(filters or {})).order_by("id")
        return await build_paginate(paginate, query).prefetch_related("motorcycle")

    async def find_rented_by_plate(self, deliverer_id, plate: str) -> Optional[Rent]:
        """Gets the rent the deliverer currently has out on the motorcycle with the given plate."""
        return await Rent.filter(
            deliverer_id=deliverer_id,
            status=RentStatus.RENTED,
            motorcycle__plate=plate.upper()
        ).first().prefetch_related("motorcycle")

    async def is_rented(self, motorcycle: Motorcycle) -> bool:
        """Checks if the motorcycle is currently out on a rent."""
        return await Rent.filter(motorcycle_id=motorcycle.id, status=RentStatus.RENTED).exists()

    async def mark_rented(self, rent: Rent, motorcycle: Motorcycle) -> Rent:
        rent.motorcycle = motorcycle
        rent.status = RentStatus.RENTED
        await rent.save()
        return rent

    async def mark_returned(self, rent: Rent, delivery_date: date, total_cost: int) -> Rent:
        rent.delivery_date = delivery_date
        rent.total_cost = total_cost
        rent.status = RentStatus.RETURNED
        await rent.save()
        return rent


async def get_rent(rent_id: int) -> Optional[Rent]:
    """Gets a rent with its motorcycle, if any."""
    return await Rent.filter(id=rent_id).first().prefetch_related("motorcycle")
