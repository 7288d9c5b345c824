"""
Base
------------------------

The base view for the API. This view contains functionality
required in all other views.
"""

from typing import Optional

from aiohttp.abc import Application
from aiohttp.web import View, AbstractRoute
from aiohttp_cors import CorsConfig, CorsViewMixin, ResourceOptions

from motorent.service import DelivererService, RentService, RentBudgetService, RentLifecycle
from motorent.service.access.plans import RentPlanRepository
from motorent.service.access.rents import RentRepository


class ViewConfigurationError(Exception):
    """
    Raised if the view doesn't provide a URL.
    """


class BaseView(View, CorsViewMixin):
    """
    The base view that all other views extend. It gives
    every view a handle on the services stored on the app.
    """

    url: str
    name: Optional[str]
    route: AbstractRoute
    deliverer_service: DelivererService
    rent_service: RentService
    rent_budget_service: RentBudgetService
    rent_lifecycle: RentLifecycle
    rent_repository: RentRepository
    rent_plan_repository: RentPlanRepository

    cors_config = {
        "*": ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    }

    @classmethod
    def register_route(cls, app: Application, base: Optional[str] = None):
        """
        Registers the view with the given router.

        :raises ViewConfigurationError: If the URL hasn't been set on the given view.
        """
        try:
            url = base + cls.url if base is not None else cls.url
        except AttributeError:
            raise ViewConfigurationError("No URL provided!")

        kwargs = {}
        name = getattr(cls, "name", None)
        if name is not None:
            kwargs["name"] = name

        cls.route = app.router.add_view(url, cls, **kwargs)
        cls.deliverer_service = app["deliverer_service"]
        cls.rent_service = app["rent_service"]
        cls.rent_budget_service = app["rent_budget_service"]
        cls.rent_lifecycle = app["rent_lifecycle"]
        cls.rent_repository = app["rent_repository"]
        cls.rent_plan_repository = app["rent_plan_repository"]

    @classmethod
    def enable_cors(cls, cors: CorsConfig):
        """Enables CORS on the view."""
        try:
            cors.add(cls.route, webview=True)
        except AttributeError as error:
            raise ViewConfigurationError("No route assigned. Please register the route first.") from error
