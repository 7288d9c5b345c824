"""
Deliverer Related Views
-------------------------

Handles registering deliverers, and the upload of their driver licenses.
"""
from http import HTTPStatus

from aiohttp.web_request import FileField
from aiohttp_apispec import docs

from motorent.models import Deliverer
from motorent.permissions import requires, ValidToken, UserIsAdmin, DelivererMatchesToken
from motorent.serializer import JSendSchema, success, expects, expects_query, returns, Many
from motorent.serializer.misc import DelivererQuerySchema
from motorent.serializer.models import DelivererSchema, PaginateSchema
from motorent.service.access.deliverers import get_deliverer
from motorent.service.access.paginate import FilterQuery, Paginate
from motorent.service.errors import BadRequestError
from motorent.views.base import BaseView
from motorent.views.decorators import match_getter

LICENSE_IMAGE_FIELD = "image"


class DeliverersView(BaseView):
    """
    Gets or adds to the list of deliverers.
    """
    url = "/deliverers"
    name = "deliverers"

    @docs(summary="Get All Deliverers")
    @requires(UserIsAdmin())
    @expects_query(DelivererQuerySchema())
    @returns(JSendSchema.of(deliverers=Many(DelivererSchema()), paginate=PaginateSchema()))
    async def get(self):
        query = dict(self.request["query"])
        paginate = Paginate(query.pop("page"), query.pop("per_page"))
        deliverers = await self.deliverer_service.paginate(FilterQuery(query, paginate))
        return success(
            deliverers=[deliverer.serialize(self.request.app.router) for deliverer in deliverers],
            paginate=paginate._asdict()
        )

    @docs(summary="Register A Deliverer")
    @requires(ValidToken())
    @expects(DelivererSchema(only=(
        "name", "email", "cnpj", "birth_date", "driver_license_number", "driver_license_type"
    )))
    @returns(JSendSchema.of(deliverer=DelivererSchema()), HTTPStatus.CREATED)
    async def post(self):
        """
        Anyone holding a valid token can register as a deliverer, once.
        The token is then used to act as that deliverer.
        """
        deliverer = await self.deliverer_service.register_deliverer(self.request["data"], self.request["token"])
        return success(deliverer=deliverer.serialize(self.request.app.router))


class DelivererView(BaseView):
    """
    Gets a single deliverer.
    """
    url = r"/deliverers/{id:\d+}"
    name = "deliverer"
    with_deliverer = match_getter(get_deliverer, 'deliverer', deliverer_id='id')

    @with_deliverer
    @docs(summary="Get A Deliverer")
    @requires(DelivererMatchesToken() | UserIsAdmin())
    @returns(JSendSchema.of(deliverer=DelivererSchema()))
    async def get(self, deliverer: Deliverer):
        return success(deliverer=deliverer.serialize(self.request.app.router))


class DelivererLicenseView(BaseView):
    """
    Replaces the image of the deliverer's driver license.
    """
    url = r"/deliverers/{id:\d+}/license"
    name = "deliverer_license"
    with_deliverer = match_getter(get_deliverer, 'deliverer', deliverer_id='id')

    @with_deliverer
    @docs(summary="Upload A Driver License Image")
    @requires(DelivererMatchesToken())
    @returns(JSendSchema.of(deliverer=DelivererSchema()))
    async def put(self, deliverer: Deliverer):
        """
        Accepts either a multipart form with the image in the ``image`` field,
        or the raw image as the body. Only PNG and BMP images are accepted.
        """
        if self.request.content_type.startswith("multipart/"):
            form = await self.request.post()
            upload = form.get(LICENSE_IMAGE_FIELD)
            if not isinstance(upload, FileField):
                raise BadRequestError(f"The image must be sent in the \"{LICENSE_IMAGE_FIELD}\" field.")
            content_type, content = upload.content_type, upload.file.read()
        else:
            content_type, content = self.request.content_type, await self.request.read()

        deliverer = await self.deliverer_service.attach_document(deliverer, content_type, content)
        return success(deliverer=deliverer.serialize(self.request.app.router))
