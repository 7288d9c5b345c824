"""
The service layer for the system. Acts as the internal API.
The REST views use the service layer to implement their logic.

It holds the business rules for booking, quoting and closing
rents, and leaves storage to :mod:`motorent.service.access`.
"""

from .clock import Clock, FixedClock
from .errors import ServiceError, BadRequestError, NotFoundError
from .deliverers import DelivererService
from .rent_service import RentService
from .rent_budget_service import RentBudget, RentBudgetService
from .rent_lifecycle import RentLifecycle
