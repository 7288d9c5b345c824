"""
Rent
---------------------------

A rent goes through three states: it is created ``processing`` with a
forecasted cost, becomes ``rented`` when the deliverer picks up a
motorcycle, and ends ``returned`` once the actual cost is known.
"""

from datetime import date
from typing import Dict, Any, NamedTuple

from tortoise import Model, fields

from motorent.models.fields import EnumField
from motorent.models.util import RentStatus


class RentPlan(NamedTuple):
    """A fixed-duration pricing tier."""

    days: int
    daily_rate: int
    """The price per day (in cents)."""

    @property
    def total(self) -> int:
        return self.days * self.daily_rate


class Rent(Model):
    id = fields.IntField(pk=True)
    deliverer = fields.ForeignKeyField("models.Deliverer", related_name="rents")
    motorcycle = fields.ForeignKeyField("models.Motorcycle", related_name="rents", null=True)

    start_date: date = fields.DateField()
    end_date: date = fields.DateField()
    delivery_forecast_date: date = fields.DateField()
    delivery_date: date = fields.DateField(null=True)

    plan_days = fields.IntField()
    plan_daily_rate = fields.IntField()

    total_cost = fields.IntField()
    """The cost of the rent (in cents). Forecasted until the rent is returned."""

    status: RentStatus = EnumField(RentStatus, default=RentStatus.PROCESSING)
    created_at = fields.DatetimeField(auto_now_add=True)

    @property
    def plan(self) -> RentPlan:
        return RentPlan(self.plan_days, self.plan_daily_rate)

    @property
    def plate(self):
        return self.motorcycle.plate if self.motorcycle_id is not None else None

    def serialize(self, router=None) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "deliverer_id": self.deliverer_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "delivery_forecast_date": self.delivery_forecast_date,
            "plan": dict(self.plan._asdict(), total=self.plan.total),
            "total_cost": self.total_cost,
            "status": self.status,
        }

        if self.motorcycle_id is not None:
            data["motorcycle_id"] = self.motorcycle_id
            data["plate"] = self.plate

        if self.delivery_date is not None:
            data["delivery_date"] = self.delivery_date

        if router is not None:
            data["url"] = router["rent"].url_for(id=str(self.id)).path
            data["deliverer_url"] = router["deliverer"].url_for(id=str(self.deliverer_id)).path

        return data

    def __str__(self):
        return f"[{self.id}] {self.status.value} {self.start_date} - {self.end_date}"
