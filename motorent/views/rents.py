"""
Rent Related Views
---------------------------

Handles booking, picking up and returning motorcycles.

The ``current`` routes act on the rent the token's deliverer
has out on the motorcycle with the given plate.
"""
from http import HTTPStatus

from aiohttp_apispec import docs

from motorent.models import Deliverer, Rent
from motorent.permissions import requires, UserIsAdmin, DelivererOwnsRent
from motorent.serializer import JSendSchema, success, expects, expects_query, returns, Many
from motorent.serializer.misc import RentRequestSchema, RentQuerySchema, PickupSchema, ReturnSchema, BudgetQuerySchema
from motorent.serializer.models import RentSchema, BudgetSchema, PaginateSchema
from motorent.service import RentBudget
from motorent.service.access.deliverers import get_deliverer
from motorent.service.access.paginate import FilterQuery, Paginate
from motorent.service.access.rents import get_rent
from motorent.views.base import BaseView
from motorent.views.decorators import match_getter, GetFrom


def _serialize_budget(budget: RentBudget, router):
    return {
        "total_cost": budget.total_cost,
        "total_days_used": budget.total_days_used,
        "rent": budget.rent.serialize(router),
    }


class RentsView(BaseView):
    """
    Gets the list of rents, or books a new one.
    """
    url = "/rents"
    name = "rents"
    with_deliverer = match_getter(get_deliverer, 'deliverer', auth_id=GetFrom.AUTH_HEADER)

    @docs(summary="Get All Rents")
    @requires(UserIsAdmin())
    @expects_query(RentQuerySchema())
    @returns(JSendSchema.of(rents=Many(RentSchema()), paginate=PaginateSchema()))
    async def get(self):
        query = dict(self.request["query"])
        paginate = Paginate(query.pop("page"), query.pop("per_page"))
        rents = await self.rent_service.paginate(FilterQuery(query, paginate))
        return success(
            rents=[rent.serialize(self.request.app.router) for rent in rents],
            paginate=paginate._asdict()
        )

    @with_deliverer
    @docs(summary="Book A Rent")
    @expects(RentRequestSchema())
    @returns(JSendSchema.of(rent=RentSchema()), HTTPStatus.CREATED)
    async def post(self, deliverer: Deliverer):
        """
        Books a rent for the deliverer holding the token. The dates must
        span exactly as many days as one of the plans.
        """
        data = self.request["data"]
        rent = await self.rent_service.renting(deliverer.id, data["start_date"], data["end_date"])
        return success(rent=rent.serialize(self.request.app.router))


class RentView(BaseView):
    """
    Gets a single rent.
    """
    url = r"/rents/{id:\d+}"
    name = "rent"
    with_rent = match_getter(get_rent, 'rent', rent_id='id')

    @with_rent
    @docs(summary="Get A Rent")
    @requires(DelivererOwnsRent() | UserIsAdmin())
    @returns(JSendSchema.of(rent=RentSchema()))
    async def get(self, rent: Rent):
        return success(rent=rent.serialize(self.request.app.router))


class RentPickupView(BaseView):
    """
    Hands a motorcycle over to a booked rent.
    """
    url = r"/rents/{id:\d+}/pickup"
    name = "rent_pickup"
    with_rent = match_getter(get_rent, 'rent', rent_id='id')

    @with_rent
    @docs(summary="Pick Up A Motorcycle")
    @requires(DelivererOwnsRent())
    @expects(PickupSchema())
    @returns(JSendSchema.of(rent=RentSchema()))
    async def patch(self, rent: Rent):
        rent = await self.rent_lifecycle.pickup(rent, self.request["data"]["plate"])
        return success(rent=rent.serialize(self.request.app.router))


class CurrentRentBudgetView(BaseView):
    """
    Quotes the price of returning a motorcycle on a given date.
    """
    url = "/rents/current/budget"
    name = "current_rent_budget"
    with_deliverer = match_getter(get_deliverer, 'deliverer', auth_id=GetFrom.AUTH_HEADER)

    @with_deliverer
    @docs(summary="Get The Budget For Returning A Motorcycle")
    @expects_query(BudgetQuerySchema())
    @returns(JSendSchema.of(budget=BudgetSchema()))
    async def get(self, deliverer: Deliverer):
        query = self.request["query"]
        budget = await self.rent_budget_service.expected_return(deliverer.id, query["plate"], query["delivery_date"])
        return success(budget=_serialize_budget(budget, self.request.app.router))


class CurrentRentReturnView(BaseView):
    """
    Returns a motorcycle, closing the rent at the quoted price.
    """
    url = "/rents/current/return"
    name = "current_rent_return"
    with_deliverer = match_getter(get_deliverer, 'deliverer', auth_id=GetFrom.AUTH_HEADER)

    @with_deliverer
    @docs(summary="Return A Motorcycle")
    @expects(ReturnSchema())
    @returns(JSendSchema.of(budget=BudgetSchema()))
    async def post(self, deliverer: Deliverer):
        data = self.request["data"]
        budget = await self.rent_lifecycle.return_motorcycle(deliverer.id, data["plate"], data["delivery_date"])
        return success(budget=_serialize_budget(budget, self.request.app.router))
