"""
Decorators
----------
"""

from functools import wraps
from http import HTTPStatus

from aiohttp.web_urldispatcher import View

from motorent.permissions.permission import RoutePermissionError, Permission
from motorent.serializer.decorators import fail_response


def requires(permission: Permission):
    """
    A decorator that only runs the route if the given permission passes,
    responding with a 401 and the reasons otherwise.
    """

    if not isinstance(permission, Permission):
        raise TypeError

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                await permission(self, **kwargs)
            except RoutePermissionError as error:
                return fail_response(
                    f"You cannot do that because {error}.", HTTPStatus.UNAUTHORIZED, reasons=error.serialize()
                )

            return await original_function(self, **kwargs)

        return new_func

    return decorator
