"""
JSend
-----

Every response body in the system is a `JSend`_ envelope. This module
holds the schema that checks an envelope, and the builders the views,
decorators and middleware use to make one.

.. _`JSend`: https://github.com/omniti-labs/jsend
"""

from enum import Enum
from http import HTTPStatus
from typing import Dict, Any

from marshmallow import Schema, fields, validates_schema, ValidationError
from marshmallow.fields import Field

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


REQUIRED_KEYS = {
    JSendStatus.SUCCESS: ("data",),
    JSendStatus.FAIL: ("data",),
    JSendStatus.ERROR: ("message",),
}
"""The top level keys each status must carry."""


class JSendSchema(Schema):
    status = EnumField(JSendStatus, required=True)
    data = fields.Dict()
    message = fields.String()
    code = fields.Integer()

    @validates_schema
    def assert_envelope(self, data, **kwargs):
        status = data["status"]
        missing = [key for key in REQUIRED_KEYS[status] if key not in data]
        if missing:
            raise ValidationError(f"A {status.value} response needs {' and '.join(missing)}.")

        # a failure is always shown to a person, so it has to explain itself
        if status == JSendStatus.FAIL and "message" not in data["data"]:
            raise ValidationError("A fail response needs a message in its data.")

    @staticmethod
    def of(**data_fields) -> "JSendSchema":
        """
        Makes a JSendSchema whose ``data`` must hold the given fields.
        Schemas are nested, and fields are used as they are.

        >>> rent_schema = JSendSchema.of(rent=RentSchema())
        >>> validated_data = rent_schema.load(await response.json())
        """
        data_schema = Schema.from_dict({
            name: value if isinstance(value, Field) else fields.Nested(value)
            for name, value in data_fields.items()
        }, name="DataSchema")

        return type("TypedJSendSchema", (JSendSchema,), {"data": fields.Nested(data_schema)})()


def success(**data) -> Dict[str, Any]:
    return {"status": JSendStatus.SUCCESS, "data": data}


def fail(message: str, **details) -> Dict[str, Any]:
    """
    A failure caused by the request.

    :param message: What went wrong, for the user.
    :param details: Anything else that explains it, such as the errors per field.
    """
    return {"status": JSendStatus.FAIL, "data": dict(details, message=message)}


def error(message: str, code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR, **data) -> Dict[str, Any]:
    """A failure on our side."""
    envelope = {"status": JSendStatus.ERROR, "message": message, "code": HTTPStatus(code).value}
    if data:
        envelope["data"] = data
    return envelope
