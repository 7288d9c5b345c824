"""
App
-----
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import sentry_sdk
import uvloop
from aiohttp import web
from aiohttp_apispec import setup_aiohttp_apispec
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from motorent import server_mode, logger
from motorent.config import (
    api_root, jwt_secret, admin_ids, payment_strategy, promotional_discount, license_image_dir, sentry_dsn
)
from motorent.middleware import validate_token_middleware, service_error_middleware
from motorent.pricing import get_strategy
from motorent.service import Clock, DelivererService, RentService, RentBudgetService, RentLifecycle
from motorent.service.access.plans import RentPlanRepository
from motorent.service.access.rents import RentRepository
from motorent.service.verify_token import JWTVerifier, DummyVerifier
from motorent.signals import register_signals
from motorent.version import __version__, name
from motorent.views import register_views, enable_cors


async def enable_loop_debug(app: web.Application):
    """Turns on asyncio debug mode for the running loop."""
    asyncio.get_running_loop().set_debug(True)


def install_services(
    app: web.Application, clock: Clock = None,
    strategy_name: str = payment_strategy, license_dir: str = license_image_dir
):
    """
    Builds the services and stores them on the app, where the views pick them up.

    :param app: The app to install the services on.
    :param clock: The clock the services read the time from.
    :param strategy_name: The name of the payment strategy to price rents with.
    :param license_dir: Where the driver license images are stored.
    """
    clock = clock or Clock()

    app['clock'] = clock
    app['executor'] = ThreadPoolExecutor(max_workers=2)
    app['payment_strategy'] = get_strategy(strategy_name, discount=promotional_discount)
    logger.info("Pricing returns with the %s strategy", strategy_name)
    app['rent_plan_repository'] = RentPlanRepository()
    app['rent_repository'] = RentRepository()
    app['deliverer_service'] = DelivererService(license_dir, app['executor'])
    app['rent_service'] = RentService(
        app['rent_repository'], app['deliverer_service'], app['rent_plan_repository'], clock
    )
    app['rent_budget_service'] = RentBudgetService(app['rent_repository'], app['payment_strategy'])
    app['rent_lifecycle'] = RentLifecycle(app['rent_repository'], app['rent_budget_service'], clock)


def build_app(db_uri=None):
    """Sets up the app and installs uvloop."""
    app = web.Application(middlewares=[validate_token_middleware, service_error_middleware])
    asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())

    app['database_uri'] = db_uri if db_uri is not None else 'sqlite://:memory:'
    app['admin_ids'] = admin_ids

    if server_mode == "development":
        verifier = DummyVerifier()
    else:
        verifier = JWTVerifier(jwt_secret)

    app['token_verifier'] = verifier
    install_services(app)

    register_signals(app)

    # register views
    register_views(app, api_root)
    enable_cors(app)

    setup_aiohttp_apispec(
        app=app, title=name, version=__version__, url=f"{api_root}/docs",
        components={
            "securitySchemes": {
                "BearerToken": {
                    "type": "http",
                    "description": "A bearer token whose subject identifies the caller",
                    "scheme": "bearer",
                    "bearerFormat": "JWT",
                }
            }
        },
    )

    # set up sentry exception tracking
    if sentry_dsn is not None and server_mode != "development":
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()]
        )

    if server_mode == "development" or server_mode == "testing":
        app.on_startup.append(enable_loop_debug)

    return app
