"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from motorent import logger
from motorent.serializer import JSendSchema
from motorent.serializer.decorators import fail_response
from motorent.serializer.jsend import error as error_envelope
from motorent.service.errors import ServiceError
from motorent.service.verify_token import verify_token, TokenVerificationError

response_schema = JSendSchema()


@middleware
async def validate_token_middleware(request: Request, handler):
    """
    Ensures that any Authorization header given to the application is valid,
    and stores its subject on the request as the "token".
    """

    if "Authorization" in request.headers:
        try:
            request["token"] = verify_token(request)
        except TokenVerificationError as error:
            return fail_response(
                "Supplied authorization token is invalid.", HTTPStatus.UNAUTHORIZED, errors=[error.message]
            )

    return await handler(request)


@middleware
async def service_error_middleware(request: Request, handler):
    """
    Turns errors raised by the service layer into JSend responses
    carrying the status code of the error.
    """

    try:
        return await handler(request)
    except ServiceError as error:
        status = HTTPStatus(error.status)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.exception("Service error on %s %s", request.method, request.rel_url)
            return web.json_response(
                response_schema.dump(error_envelope(error.message, status, **error.details)), status=status
            )

        return fail_response(error.message, status, **error.details)
