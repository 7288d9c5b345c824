"""
The models package contains all the models used on the server.

.. autoclasstree:: motorent.models
"""

from .deliverer import Deliverer
from .motorcycle import Motorcycle
from .rent import Rent, RentPlan
from .util import LicenseType, RentStatus
