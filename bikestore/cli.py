"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from bikestore import logger
from bikestore.app import build_app
from bikestore.config import host, port, server_mode
from bikestore.version import __version__, name


def run():
    """Builds the app and serves it on a uvloop event loop."""
    logger.info('Starting %s %s!', name, __version__)
    loop = uvloop.new_event_loop()
    loop.set_debug(server_mode == "development")
    web.run_app(build_app(), host=host, port=port, loop=loop)


if __name__ == '__main__':
    run()
