"""
Plan Related Views
------------------
"""
from aiohttp_apispec import docs

from motorent.serializer import JSendSchema, success, returns, Many
from motorent.serializer.models import RentPlanSchema
from motorent.views.base import BaseView


class PlansView(BaseView):
    """
    Lists the rent plans on offer.
    """
    url = "/plans"
    name = "plans"

    @docs(summary="Get All Rent Plans")
    @returns(JSendSchema.of(plans=Many(RentPlanSchema())))
    async def get(self):
        plans = await self.rent_plan_repository.all()
        return success(plans=[dict(plan._asdict(), total=plan.total) for plan in plans])
