"""
Decorators
-------------------------
"""
from enum import Enum
from functools import wraps
from inspect import isawaitable
from typing import Union, Any, Dict, Tuple

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from motorent.serializer import JSendSchema
from motorent.serializer.jsend import fail
from motorent.service.verify_token import verify_token, TokenVerificationError


class Optional:
    """Marks a match map entry or an injected parameter as optional."""

    def __init__(self, value):
        self.value = value


class GetFrom(Enum):
    AUTH_HEADER = "Authorization"


def flatten(error):
    errors = []
    for sub_error in error.args:
        if isinstance(sub_error, Exception):
            errors += flatten(sub_error)
        else:
            errors.append(sub_error)
    return errors


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    """
    Resolves each entry of the match map to a value, either from the
    url or from the subject of the bearer token.

    :raises ValueError: Containing every problem found with the request.
    """
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():
        is_optional = isinstance(value, Optional)
        if is_optional:
            value = value.value

        if isinstance(value, str):
            value = (value, int)

        if isinstance(value, tuple):
            name, converter = value
            param = request.match_info.get(name)
            if param is None:
                if not is_optional:
                    errors.append(ValueError(f'Missing url parameter "{name}".'))
                continue
            try:
                resolved_matches[key] = converter(param)
            except ValueError:
                errors.append(ValueError(
                    f'Could not convert url parameter "{param}" to expected type {converter.__name__}.'))
        elif value == GetFrom.AUTH_HEADER:
            if "token" in request:
                resolved_matches[key] = request["token"]
                continue
            if "Authorization" not in request.headers and is_optional:
                continue
            try:
                resolved_matches[key] = verify_token(request)
            except TokenVerificationError as error:
                errors.append(ValueError(error.message))
        else:
            raise TypeError(f"match_getter incorrectly configured (doesn't support {type(value)})")

    if errors:
        raise ValueError(*errors)
    return resolved_matches


def match_getter(getter_function, *injection_parameters: Union[str, Optional],
                 **match_map: Union[str, GetFrom, Optional, Tuple[str, type]]):
    """
    Automatically fetches and includes an item, or 404's if it doesn't exist.

    .. code-block:: python

        @match_getter(get_motorcycle, 'motorcycle', motorcycle_id='id')
        async def get(self, motorcycle: Motorcycle)
            return web.json_response(data=motorcycle.serialize())

    :param getter_function: The function to fetch the item from.
    :param injection_parameters: The name of the parameter to pass the object as.
    :param match_map: Associates a kwarg on the ``getter_function`` to a url variable or the auth header.
    :return: A decorator that wraps the response and passes in the object.
    """

    def attach_instance(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except (ValueError, TypeError) as error:
                response = fail("Errors with your request.", errors=flatten(error))
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            item = getter_function(**params)
            if isawaitable(item):
                item = await item

            # a getter returning a tuple fills one parameter per item
            if len(injection_parameters) > 1 and isinstance(item, tuple) and len(injection_parameters) == len(item):
                optional_injected_kwargs = dict(zip(injection_parameters, item))
            else:
                optional_injected_kwargs = {injection_parameters[0]: item}

            not_found = []
            injected_kwargs = {}
            for key, value in optional_injected_kwargs.items():
                if isinstance(key, Optional):
                    injected_kwargs[key.value] = value
                elif value is None:
                    not_found.append(key)
                else:
                    injected_kwargs[key] = value

            if not_found:
                response = fail(
                    f'Could not find {", ".join(not_found)} with the given params.',
                    params={key: str(value) for key, value in params.items()}
                )
                raise web.HTTPNotFound(text=JSendSchema().dumps(response), content_type='application/json')

            return await original_function(self, **kwargs, **injected_kwargs)

        return new_func

    return attach_instance
