"""
Motorcycle Related Views
-------------------------

Handles the fleet CRUD. Only admins may manage the fleet.
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp_apispec import docs

from motorent.models import Motorcycle
from motorent.permissions import requires, UserIsAdmin
from motorent.serializer import JSendSchema, success, expects, expects_query, returns, Many
from motorent.serializer.misc import MotorcycleQuerySchema
from motorent.serializer.models import MotorcycleSchema, PaginateSchema
from motorent.service.access.motorcycles import (
    get_motorcycle, get_motorcycles, create_motorcycle, update_motorcycle, delete_motorcycle
)
from motorent.service.access.paginate import Paginate
from motorent.views.base import BaseView
from motorent.views.decorators import match_getter


class MotorcyclesView(BaseView):
    """
    Gets or adds to the fleet.
    """
    url = "/motorcycles"
    name = "motorcycles"

    @docs(summary="Get All Motorcycles")
    @requires(UserIsAdmin())
    @expects_query(MotorcycleQuerySchema())
    @returns(JSendSchema.of(motorcycles=Many(MotorcycleSchema()), paginate=PaginateSchema()))
    async def get(self):
        query = self.request["query"]
        paginate = Paginate(query["page"], query["per_page"])
        motorcycles = await get_motorcycles(plate=query.get("plate"), paginate=paginate)
        return success(
            motorcycles=[motorcycle.serialize(self.request.app.router) for motorcycle in motorcycles],
            paginate=paginate._asdict()
        )

    @docs(summary="Create A Motorcycle")
    @requires(UserIsAdmin())
    @expects(MotorcycleSchema(only=("year", "model", "plate")))
    @returns(JSendSchema.of(motorcycle=MotorcycleSchema()), HTTPStatus.CREATED)
    async def post(self):
        motorcycle = await create_motorcycle(**self.request["data"])
        return success(motorcycle=motorcycle.serialize(self.request.app.router))


class MotorcycleView(BaseView):
    """
    Gets, updates or deletes a single motorcycle.
    """
    url = r"/motorcycles/{id:\d+}"
    name = "motorcycle"
    with_motorcycle = match_getter(get_motorcycle, 'motorcycle', motorcycle_id='id')

    @docs(summary="Get A Motorcycle")
    @requires(UserIsAdmin())
    @with_motorcycle
    @returns(JSendSchema.of(motorcycle=MotorcycleSchema()))
    async def get(self, motorcycle: Motorcycle):
        return success(motorcycle=motorcycle.serialize(self.request.app.router))

    @docs(summary="Change The Plate Of A Motorcycle")
    @requires(UserIsAdmin())
    @with_motorcycle
    @expects(MotorcycleSchema(only=("plate",)))
    @returns(JSendSchema.of(motorcycle=MotorcycleSchema()))
    async def patch(self, motorcycle: Motorcycle):
        motorcycle = await update_motorcycle(motorcycle, plate=self.request["data"]["plate"])
        return success(motorcycle=motorcycle.serialize(self.request.app.router))

    @docs(summary="Delete A Motorcycle")
    @requires(UserIsAdmin())
    @with_motorcycle
    async def delete(self, motorcycle: Motorcycle):
        await delete_motorcycle(motorcycle)
        raise web.HTTPNoContent
