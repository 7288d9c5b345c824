"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import Integer, Boolean, String, Email, Nested, Date, Url
from marshmallow.validate import Regexp, Range, Length

from motorent.models.util import LicenseType, RentStatus
from .fields import EnumField

PLATE_REGEX = r"^[A-Za-z0-9-]{5,16}$"


class DelivererSchema(Schema):
    """The schema corresponding to the :class:`~motorent.models.deliverer.Deliverer` model."""

    id = Integer()
    url = Url(relative=True)

    name = String(required=True, validate=Length(min=1, max=255))
    email = Email(required=True)
    cnpj = String(required=True, validate=Regexp(r"^\d{14}$", error="A CNPJ is made of 14 digits."))
    birth_date = Date(required=True)

    driver_license_number = String(
        required=True, validate=Regexp(r"^\d{11}$", error="A driver license number is made of 11 digits.")
    )
    driver_license_type = EnumField(LicenseType, required=True)
    has_license_image = Boolean()


class MotorcycleSchema(Schema):
    id = Integer()
    url = Url(relative=True)
    year = Integer(required=True, validate=Range(min=1900, max=2100))
    model = String(required=True, validate=Length(min=1, max=255))
    plate = String(required=True, validate=Regexp(PLATE_REGEX, error="Not a valid plate."))


class RentPlanSchema(Schema):
    days = Integer(required=True)
    daily_rate = Integer(required=True)
    total = Integer()


class RentSchema(Schema):
    """The schema corresponding to the :class:`~motorent.models.rent.Rent` model."""

    id = Integer(required=True)
    url = Url(relative=True)

    deliverer_id = Integer(required=True)
    deliverer_url = Url(relative=True)

    motorcycle_id = Integer()
    plate = String()

    start_date = Date(required=True)
    end_date = Date(required=True)
    delivery_forecast_date = Date(required=True)
    delivery_date = Date()

    plan = Nested(RentPlanSchema(), required=True)
    total_cost = Integer(required=True)
    status = EnumField(RentStatus, required=True)

    @validates_schema
    def assert_motorcycle_with_plate(self, data, **kwargs):
        """
        Asserts that when a motorcycle is assigned its plate is sent with it.
        """
        if "motorcycle_id" in data and "plate" not in data:
            raise ValidationError("Motorcycle ID was included, but the plate was not.")

    @validates_schema
    def assert_delivery_date_when_returned(self, data, **kwargs):
        """
        Asserts that returned rents carry their delivery date.
        """
        if data.get("status") is RentStatus.RETURNED and "delivery_date" not in data:
            raise ValidationError("A returned rent must include its delivery date.")


class BudgetSchema(Schema):
    total_cost = Integer(required=True)
    total_days_used = Integer(required=True)
    rent = Nested(RentSchema(), required=True)


class PaginateSchema(Schema):
    """The pagination arguments accepted on list routes."""

    page = Integer(load_default=1, validate=Range(min=1))
    per_page = Integer(load_default=10, validate=Range(min=1, max=100))
