"""
.. autoclasstree:: motorent.views

This package contains the server API for booking,
picking up and returning motorcycles.

API Conventions
---------------

The API is ordered in terms of resources (deliverers, motorcycles,
rents), accepts and returns JSON with snake_case key naming, and
supports filtering and pagination through the query string.

The server responds with JSend formatted JSON to all GET, POST, PUT
and PATCH requests. DELETE requests respond with a 204 no content.
"""

import aiohttp_cors
from aiohttp.abc import Application

from motorent import logger
from .deliverers import DeliverersView, DelivererView, DelivererLicenseView
from .motorcycles import MotorcyclesView, MotorcycleView
from .plans import PlansView
from .rents import RentsView, RentView, RentPickupView, CurrentRentBudgetView, CurrentRentReturnView

views = [
    PlansView,
    DeliverersView, DelivererView, DelivererLicenseView,
    MotorcyclesView, MotorcycleView,
    RentsView, RentView, RentPickupView, CurrentRentBudgetView, CurrentRentReturnView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)


def enable_cors(app: Application):
    """Enables CORS on every registered view."""
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        view.enable_cors(cors)
