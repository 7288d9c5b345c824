"""
Decorators
----------

Decorators that load and check the data going in and out of the routes.
A route reads its validated input from the request, and returns a plain
dictionary that is dumped (and checked) on the way out.

.. code:: python

    @expects(PickupSchema())
    @returns(JSendSchema.of(rent=RentSchema()))
    async def post(self):
        plate = self.request["data"]["plate"]
        ...
        return success(rent=rent.serialize())
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError
from marshmallow_jsonschema import JSONSchema

from motorent import logger
from motorent.serializer.jsend import JSendSchema, fail, error

envelope_schema = JSendSchema()


class UnreadableRequest(Exception):

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details


def fail_response(message, status=HTTPStatus.BAD_REQUEST, **details) -> web.Response:
    return web.json_response(envelope_schema.dump(fail(message, **details)), status=status)


async def _read_json(request: web.Request):
    if not request.body_exists or request.content_type != "application/json":
        raise UnreadableRequest(f"This route ({request.method}: {request.rel_url}) only accepts JSON.")

    try:
        return await request.json()
    except JSONDecodeError as err:
        raise UnreadableRequest("Could not parse supplied JSON.", errors=err.args)


async def _read_query(request: web.Request):
    return dict(request.query)


def _validates(schema: Schema, into: str, reader, invalid_message: str):
    """
    Loads what ``reader`` takes from the request into ``schema``, and stores
    the result on the request under ``into``. Any problem is answered with
    a fail response that also carries the JSON schema of the expected input.
    """
    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a marshmallow schema, got {schema!r}.")

    json_schema = JSONSchema().dump(schema)["definitions"][type(schema).__name__]

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                self.request[into] = schema.load(await reader(self.request))
            except UnreadableRequest as err:
                return fail_response(err.message, schema=json_schema, **err.details)
            except ValidationError as err:
                return fail_response(invalid_message, errors=err.messages, schema=json_schema)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def expects(schema: Schema, into="data"):
    """Validates the JSON body of the request."""
    return _validates(schema, into, _read_json, "The request did not validate properly.")


def expects_query(schema: Schema, into="query"):
    """Validates the query string of the request."""
    return _validates(schema, into, _read_query, "The query string did not validate properly.")


def returns(schema: Schema, status: HTTPStatus = HTTPStatus.OK):
    """
    Dumps the dictionary returned by the route with the given schema,
    and checks the result still loads before sending it. A route that
    builds its own response (for example a redirect) is passed through.

    :param schema: The schema of the response body.
    :param status: The status of the response.
    """

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            result = await original_function(self, **kwargs)
            if isinstance(result, web.StreamResponse):
                return result

            body = schema.dump(result)
            errors = schema.validate(body)
            if errors:
                logger.error("Response of %s %s did not validate: %s", self.request.method, self.request.rel_url, errors)
                return web.json_response(envelope_schema.dump(error(
                    "We tried to send you data back, but it came out wrong.", errors=errors
                )), status=HTTPStatus.INTERNAL_SERVER_ERROR)

            return web.json_response(body, status=status)

        return new_func

    return decorator
