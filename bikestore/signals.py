"""
Signals
-------

Defines a number of signals that the aiohttp server uses
to manage the lifecycle of the bike store.

Each signal must accept the ``app`` argument.
"""

from aiohttp.web import Application

from bikestore import logger
from bikestore.store import SEED_BIKES


async def seed_bike_store(app: Application):
    """Stocks the store with the initial bikes."""
    bikes = await app['bike_store'].seed(SEED_BIKES)
    logger.info("Seeded the store with %s bikes", len(bikes))


async def clear_bike_store(app: Application):
    """Discards every bike in the store."""
    count = await app['bike_store'].clear()
    logger.info("Discarded %s bikes", count)


def register_signals(app: Application, seed_store=True):
    """Registers all the signals at the appropriate hooks."""
    if seed_store:
        app.on_startup.append(seed_bike_store)

    app.on_cleanup.append(clear_bike_store)
