"""
App
-----
"""

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from bikestore import logger
from bikestore.config import api_root, server_mode, sentry_dsn
from bikestore.middleware import error_middleware
from bikestore.signals import register_signals
from bikestore.store import MemoryStore
from bikestore.version import __version__
from bikestore.views import register_views


def build_app(seed_store=True):
    """Sets up the app, its store, and its routes."""
    app = web.Application(middlewares=[error_middleware])

    app['bike_store'] = MemoryStore()

    register_signals(app, seed_store=seed_store)
    register_views(app, api_root)

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn is not None:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"bikestore@{__version__}",
            integrations=[AioHttpIntegration()]
        )

    return app
