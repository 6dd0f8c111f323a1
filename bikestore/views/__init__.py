"""
.. autoclasstree:: bikestore.views

This package contains the server API for listing,
adding, replacing, and removing bikes.

API Conventions
---------------

The API conforms as best as possible to the REST standard. In short,
the api must:

* Be ordered in terms of resources (nouns such as bike)
* Have multiple ways of accessing the same resource (GET, POST, PATCH, DELETE)
* Accept and return JSON with snake_case key naming

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all requests. Client
errors (malformed ids or bodies) are reported as ``fail`` with a 400,
missing bikes as ``fail`` with a 404, and faults in the server itself
as ``error`` with a 500.
"""

from aiohttp.web import Application

from bikestore import logger
from .bikes import BikeView, BikesView

views = [
    BikesView, BikeView,
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
