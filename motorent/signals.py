"""
Signals
-------

Defines the signals that the aiohttp server uses to open
and close its resources.

Each signal must accept the ``app`` argument.
"""
import asyncio
from functools import partial

from aiohttp.abc import Application
from tortoise import Tortoise

from motorent import logger


async def initialize_database(app: Application):
    """Initializes and generates the schema for our database."""
    logger.info("Connecting to the database")
    await Tortoise.init(
        db_url=app['database_uri'],
        modules={'models': ['motorent.models']}
    )
    await Tortoise.generate_schemas(safe=True)


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await Tortoise.close_connections()


async def shutdown_executor(app: Application):
    """
    Waits for any file writes still running on the executor. The wait
    happens on the loop's default executor so the loop is not blocked.
    """
    executor = app.get('executor')
    if executor is not None:
        await asyncio.get_running_loop().run_in_executor(None, partial(executor.shutdown, wait=True))


def register_signals(app, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)

    app.on_cleanup.append(shutdown_executor)
    app.on_cleanup.append(close_database_connections)
