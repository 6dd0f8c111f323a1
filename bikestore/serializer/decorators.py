"""
Decorators
----------

``expects`` validates the JSON body of a bike request before the view runs,
and ``returns`` dumps whatever the view hands back through a schema. Between
them, the views in :mod:`bikestore.views.bikes` only deal in plain dicts.
"""

from functools import wraps
from http import HTTPStatus
from typing import Optional, Tuple, Union

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from bikestore import logger
from bikestore.serializer.jsend import JSendSchema, JSendStatus

response_schema = JSendSchema()


def fail(message: str, **details):
    """A 400 JSend fail response."""
    return web.json_response(response_schema.dump({
        "status": JSendStatus.FAIL,
        "data": {"message": message, **details}
    }), status=HTTPStatus.BAD_REQUEST)


def expects(schema: Schema, into="data"):
    """
    Loads the JSON body through ``schema`` and stores the result on the
    request under ``into``. Bodies that are missing, not JSON, not decodable
    or invalid are answered with a 400 and never reach the view.

    .. code:: python

        @expects(BikeDetailsSchema())
        async def post(self):
            bike = await self.bike_store.create_bike(**self.request["data"])
    """

    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a marshmallow Schema, got {type(schema)}")

    expected_fields = sorted(schema.fields)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            request = self.request

            if not request.body_exists or request.content_type != "application/json":
                return fail(
                    f"This route ({request.method}: {request.rel_url}) only accepts JSON.",
                    fields=expected_fields
                )

            try:
                body = await request.json()
            except (ValueError, LookupError) as err:
                # bad json, bytes that don't decode, or an unknown charset
                return fail("Could not parse supplied JSON.", errors=[str(err)])

            try:
                request[into] = schema.load(body)
            except ValidationError as err:
                return fail("The request did not validate properly.", errors=err.messages, fields=expected_fields)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(
    schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK,
    **named_schema: Union[Schema, Tuple[Schema, HTTPStatus]]
):
    """
    Dumps the view's return value through ``schema`` with ``return_code``.

    Views with more than one outcome declare them by name instead, each
    with a schema or a ``(schema, status)`` pair, and return a
    ``(name, data)`` tuple:

    .. code:: python

        @returns(deleted=JSendSchema.of(bike=BikeSchema()), missing=(JSendSchema(), HTTPStatus.NOT_FOUND))
        async def delete(self, bike):
            ...
            return "deleted", {"status": JSendStatus.SUCCESS, "data": {"bike": bike.serialize()}}

    A name that was never declared is reported as a 500.
    """

    named_schema[None] = (schema, return_code)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            if schema is not None:
                schema_name, response_data = None, await original_function(self, **kwargs)
            else:
                schema_name, response_data = await original_function(self, **kwargs)

            try:
                matched_schema = named_schema[schema_name]
                if isinstance(matched_schema, tuple):
                    matched_schema, matched_return_code = matched_schema
                else:
                    matched_schema, matched_return_code = matched_schema, return_code
                return web.json_response(matched_schema.dump(response_data), status=matched_return_code)
            except (ValidationError, KeyError) as err:
                logger.error("Could not serialize the response of %s: %r", original_function.__qualname__, err)
                return web.json_response(response_schema.dump({
                    "status": JSendStatus.ERROR,
                    "data": err.messages if isinstance(err, ValidationError) else err.args,
                    "message": "We tried to send you data back, but it came out wrong.",
                    "code": HTTPStatus.INTERNAL_SERVER_ERROR
                }), status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
