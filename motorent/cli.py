"""
The entry point for the CLI tool.
"""

from aiohttp import web

from motorent import logger
from motorent.app import build_app
from motorent.config import database_url, port
from motorent.version import __version__, name


def run():
    """Builds the app against the configured database and serves it."""
    logger.info(f'Starting {name} %s!', __version__)
    web.run_app(build_app(database_url), port=port)


if __name__ == '__main__':
    run()
