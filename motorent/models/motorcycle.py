"""
Motorcycle
-------------------------

A motorcycle in the fleet. Motorcycles are identified
to the deliverers by their plate.
"""

from tortoise import Model, fields


class Motorcycle(Model):
    id = fields.IntField(pk=True)
    year = fields.IntField()
    model = fields.CharField(max_length=255)
    plate = fields.CharField(max_length=16, unique=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    def serialize(self, router=None):
        data = {
            "id": self.id,
            "year": self.year,
            "model": self.model,
            "plate": self.plate,
        }

        if router is not None:
            data["url"] = router["motorcycle"].url_for(id=str(self.id)).path

        return data

    def __str__(self):
        return f"[{self.plate}] {self.model} ({self.year})"
