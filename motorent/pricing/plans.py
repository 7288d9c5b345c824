"""
Plans
-----

The rental plans on offer, and the fines and fees that apply
when a plan is not returned on its forecasted date.

All prices are in cents.
"""

from motorent.models.rent import RentPlan

RENT_PLANS = (
    RentPlan(days=7, daily_rate=3000),
    RentPlan(days=15, daily_rate=2800),
    RentPlan(days=30, daily_rate=2200),
    RentPlan(days=45, daily_rate=2000),
    RentPlan(days=50, daily_rate=1800),
)
"""The plans a deliverer can choose from, keyed by their exact length."""

EARLY_RETURN_FINES = {
    7: 0.2,
    15: 0.4,
}
"""The fraction of the unused days charged when a plan is returned early."""

LATE_RETURN_DAILY_FEE = 5000
"""The flat fee charged for each day past the forecasted delivery date."""

MINIMUM_CHARGED_DAYS = 1
