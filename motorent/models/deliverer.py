"""
Deliverer
---------------------------
"""

from tortoise import Model, fields

from motorent.models.fields import EnumField
from motorent.models.util import LicenseType


class Deliverer(Model):
    """
    Represents a courier registered in the system.

    The ``auth_id`` is the subject of the bearer token used to register,
    and is how a request is matched back to its deliverer.
    """

    id = fields.IntField(pk=True)
    auth_id = fields.CharField(max_length=64, unique=True)

    name = fields.CharField(max_length=255)
    email = fields.CharField(max_length=255, unique=True)
    cnpj = fields.CharField(max_length=14, unique=True)
    birth_date = fields.DateField()

    driver_license_number = fields.CharField(max_length=11, unique=True)
    driver_license_type: LicenseType = EnumField(LicenseType)
    driver_license_image = fields.CharField(max_length=255, null=True)
    """The path of the uploaded license image, if any."""

    created_at = fields.DatetimeField(auto_now_add=True)

    def serialize(self, router=None):
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "cnpj": self.cnpj,
            "birth_date": self.birth_date,
            "driver_license_number": self.driver_license_number,
            "driver_license_type": self.driver_license_type,
            "has_license_image": self.driver_license_image is not None,
        }

        if router is not None:
            data["url"] = router["deliverer"].url_for(id=str(self.id)).path

        return data

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.driver_license_type.value})"
