"""
Payment Calculation Strategies
------------------------------

A strategy prices a rent as of a given delivery time. The strategy in use
is picked by name from the configuration, see :func:`get_strategy`.
"""

import abc
from datetime import datetime, date
from typing import NamedTuple

from motorent.models import Rent
from motorent.pricing.plans import EARLY_RETURN_FINES, LATE_RETURN_DAILY_FEE, MINIMUM_CHARGED_DAYS


class CostResult(NamedTuple):
    total_cost: int
    total_days_used: int


def days_used(rent: Rent, delivered: date) -> int:
    """The whole days between the start of the rent and its delivery."""
    return max((delivered - rent.start_date).days, 0)


class PaymentCalculationStrategy(abc.ABC):

    @abc.abstractmethod
    async def calculate_cost(self, rent: Rent, as_of: datetime) -> CostResult:
        """
        Prices the rent as if it were delivered at the given time.

        :param rent: The rent to price.
        :param as_of: The (timezone aware) delivery time.
        """


class DailyRateStrategy(PaymentCalculationStrategy):
    """Charges the plan's daily rate for every day used, with no fines."""

    async def calculate_cost(self, rent: Rent, as_of: datetime) -> CostResult:
        used = days_used(rent, as_of.date())
        charged = max(used, MINIMUM_CHARGED_DAYS)
        return CostResult(charged * rent.plan.daily_rate, used)


class ReturnPenaltyStrategy(PaymentCalculationStrategy):
    """
    Charges the full plan when returned on time.

    Returning early charges the days used plus a fine on the unused days,
    depending on the plan. Returning late charges the full plan plus a
    flat fee for every extra day.
    """

    async def calculate_cost(self, rent: Rent, as_of: datetime) -> CostResult:
        plan = rent.plan
        delivered = as_of.date()
        used = days_used(rent, delivered)

        if delivered < rent.delivery_forecast_date:
            unused = plan.days - used
            fine = EARLY_RETURN_FINES.get(plan.days, 0)
            cost = used * plan.daily_rate + int(round(unused * plan.daily_rate * fine))
        elif delivered > rent.delivery_forecast_date:
            extra_days = (delivered - rent.delivery_forecast_date).days
            cost = plan.total + extra_days * LATE_RETURN_DAILY_FEE
        else:
            cost = plan.total

        return CostResult(cost, used)


class PromotionalStrategy(PaymentCalculationStrategy):
    """Takes a fixed fraction off whatever the wrapped strategy charges."""

    def __init__(self, strategy: PaymentCalculationStrategy, discount: float):
        if not 0 <= discount < 1:
            raise ValueError(f"Discount must be in the range [0, 1), not {discount}.")
        self._strategy = strategy
        self.discount = discount

    async def calculate_cost(self, rent: Rent, as_of: datetime) -> CostResult:
        result = await self._strategy.calculate_cost(rent, as_of)
        return result._replace(total_cost=int(round(result.total_cost * (1 - self.discount))))


def get_strategy(name: str, *, discount: float = 0.0) -> PaymentCalculationStrategy:
    """
    Builds the strategy with the given name.

    :param name: One of ``daily``, ``penalty`` or ``promotional``.
    :param discount: The discount used by the promotional strategy.
    :raises ValueError: If there is no strategy with that name.
    """
    if name == "daily":
        return DailyRateStrategy()
    elif name == "penalty":
        return ReturnPenaltyStrategy()
    elif name == "promotional":
        return PromotionalStrategy(ReturnPenaltyStrategy(), discount)
    else:
        raise ValueError(f"Unknown payment strategy {name}. Pick between daily, penalty or promotional.")
