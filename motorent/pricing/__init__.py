"""
The pricing module holds the rental plans on offer and the strategies used
to work out what a deliverer owes when a motorcycle comes back, taking into
account early and late returns.
"""

from .plans import RENT_PLANS, EARLY_RETURN_FINES, LATE_RETURN_DAILY_FEE, MINIMUM_CHARGED_DAYS
from .strategies import (
    CostResult, PaymentCalculationStrategy, DailyRateStrategy, ReturnPenaltyStrategy,
    PromotionalStrategy, get_strategy
)
