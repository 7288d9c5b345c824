from aiohttp.web_urldispatcher import View

from motorent.models import Deliverer, Rent
from motorent.permissions.permission import RoutePermissionError, Permission
from motorent.service.access.deliverers import get_deliverer
from motorent.service.verify_token import verify_token, TokenVerificationError


def _token(view: View) -> str:
    """Gets the verified token subject of the request, verifying it if the middleware has not."""
    if "token" not in view.request:
        try:
            view.request["token"] = verify_token(view.request)
        except TokenVerificationError as error:
            raise RoutePermissionError(error.message)

    return view.request["token"]


class ValidToken(Permission):
    """Asserts that the request has a valid bearer token."""

    async def __call__(self, view: View, **kwargs):
        _token(view)

    def __repr__(self):
        return "ValidToken()"


class UserIsAdmin(Permission):
    """Asserts that the token belongs to one of the configured admins."""

    async def __call__(self, view: View, **kwargs):
        token = _token(view)

        if token not in view.request.app["admin_ids"]:
            raise RoutePermissionError("The supplied token doesn't have admin rights.")

    def __repr__(self):
        return "UserIsAdmin()"


class DelivererMatchesToken(Permission):
    """Asserts that the given deliverer was registered with the token."""

    async def __call__(self, view: View, deliverer: Deliverer = None, **kwargs):
        token = _token(view)

        if deliverer is None or not deliverer.auth_id == token:
            raise RoutePermissionError("The supplied token doesn't have access to this deliverer.")

    def __repr__(self):
        return "DelivererMatchesToken()"


class DelivererOwnsRent(Permission):
    """Asserts that the given rent was booked by the deliverer holding the token."""

    async def __call__(self, view: View, rent: Rent = None, **kwargs):
        token = _token(view)

        deliverer = await get_deliverer(auth_id=token)
        if rent is None or deliverer is None or not rent.deliverer_id == deliverer.id:
            raise RoutePermissionError("The supplied token did not book this rent.")

    def __repr__(self):
        return "DelivererOwnsRent()"
