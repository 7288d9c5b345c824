"""
Rent Plans
----------

The plans are fixed, so they are kept in memory rather than in the database.
"""
from typing import Optional, Iterable, List

from motorent.models import RentPlan
from motorent.pricing import RENT_PLANS


class RentPlanRepository:

    def __init__(self, plans: Iterable[RentPlan] = RENT_PLANS):
        self._plans = {plan.days: plan for plan in plans}

    async def find_by(self, days: int) -> Optional[RentPlan]:
        """Gets the plan lasting exactly the given number of days."""
        return self._plans.get(days)

    async def all(self) -> List[RentPlan]:
        return sorted(self._plans.values())
