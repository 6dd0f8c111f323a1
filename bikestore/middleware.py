"""
Middleware
----------
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.web import Request
from aiohttp.web_middlewares import middleware

from bikestore import logger
from bikestore.serializer import JSendStatus, JSendSchema

response_schema = JSendSchema()


@middleware
async def error_middleware(request: Request, handler):
    """
    Ensures that any unexpected exception raised while handling
    a request is logged and reported to the client as a JSend error.
    HTTP exceptions raised on purpose are passed straight through.
    """

    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as error:
        logger.exception("Unhandled error on %s %s", request.method, request.rel_url)
        return web.json_response(response_schema.dump({
            "status": JSendStatus.ERROR,
            "message": "Something went wrong on our end.",
            "data": {"errors": [repr(error)]},
            "code": HTTPStatus.INTERNAL_SERVER_ERROR
        }), status=HTTPStatus.INTERNAL_SERVER_ERROR)
