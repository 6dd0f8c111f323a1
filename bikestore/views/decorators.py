"""
Decorators
-------------------------
"""
from functools import wraps
from inspect import isawaitable
from typing import Any, Dict, Tuple, Callable

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from bikestore.serializer import JSendStatus, JSendSchema


def flatten(error):
    errors = []
    for sub_error in error.args:
        if isinstance(sub_error, Exception):
            errors += flatten(sub_error)
        else:
            errors.append(sub_error)
    return errors


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():

        if not isinstance(value, tuple):
            raise TypeError(f"match_getter incorrectly configured (doesn't support {type(value)})")

        param = request.match_info.get(value[0])
        try:
            resolved_matches[key] = value[1](param)
        except (ValueError, TypeError):
            errors.append(ValueError(
                f'Could not convert url parameter "{param}" to expected type {value[1].__name__}.'))

    if errors:
        raise ValueError(*errors)
    return resolved_matches


def match_getter(getter_function: Callable, *injection_parameters: str, **match_map: Tuple[str, type]):
    """
    Automatically fetches and includes an item, 400's if the url
    parameters can't be converted, or 404's if it doesn't exist.

    The getter is called with the view and the resolved parameters,
    and signals a missing item by returning ``None`` or raising
    a :class:`LookupError`.

    .. code-block:: python

        # example usage
        @match_getter(get_bike, 'bike', bike_id=('id', CanonicalUUID))
        async def get(self, bike: Bike)
            return web.json_response(data=bike.serialize())

    :param getter_function: The function to fetch the item from.
    :param injection_parameters: The name of the parameter to pass the object as.
    :param match_map: Associates a kwarg on the ``getter_function`` to a url variable and its type.
    :return: A decorator that wraps the response and passes in the object.
    """

    def attach_instance(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except ValueError as error:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Errors with your request.",
                        "errors": flatten(error)
                    }
                }
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            try:
                item = getter_function(self, **params)
                if isawaitable(item):
                    item = await item
            except LookupError:
                item = None

            if item is None:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": f'Could not find {", ".join(injection_parameters)} with the given params.',
                        "params": {key: str(value) for key, value in params.items()}
                    }
                }
                raise web.HTTPNotFound(text=JSendSchema().dumps(response), content_type='application/json')

            # if the getter function returns multiple items,
            # and there are multiple parameter names,
            # then set those keys in the decorated function
            if isinstance(item, tuple) and len(injection_parameters) == len(item):
                injected_kwargs = dict(zip(injection_parameters, item))
            else:
                injected_kwargs = {injection_parameters[0]: item}

            return await original_function(self, **kwargs, **injected_kwargs)

        return new_func

    return attach_instance
