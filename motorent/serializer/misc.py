from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import String, Date, Integer

from motorent.models.util import LicenseType, RentStatus
from .fields import EnumField
from .models import PaginateSchema


class RentRequestSchema(Schema):
    """The schema of the rent request."""
    start_date = Date(required=True, metadata={"description": "The first day of the rent."})
    end_date = Date(required=True, metadata={"description": "The day the motorcycle is due back."})

    @validates_schema
    def assert_end_after_start(self, data, **kwargs):
        if data["end_date"] < data["start_date"]:
            raise ValidationError("The end date must not be before the start date.", "end_date")


class PickupSchema(Schema):
    plate = String(required=True, metadata={"description": "The plate of the motorcycle being picked up."})


class ReturnSchema(Schema):
    plate = String(required=True, metadata={"description": "The plate of the motorcycle being returned."})
    delivery_date = Date(required=True)


class BudgetQuerySchema(ReturnSchema):
    """The query string of the budget request."""


class DelivererQuerySchema(PaginateSchema):
    cnpj = String()
    driver_license_number = String()
    driver_license_type = EnumField(LicenseType)


class MotorcycleQuerySchema(PaginateSchema):
    plate = String()


class RentQuerySchema(PaginateSchema):
    status = EnumField(RentStatus)
    deliverer_id = Integer()
