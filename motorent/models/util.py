from enum import Enum


class LicenseType(str, Enum):
    """We subclass string to make json serialization work."""
    A = "A"
    B = "B"

    @staticmethod
    def authorized_types():
        """The license types that may rent a motorcycle."""
        return LicenseType.A,


class RentStatus(str, Enum):
    PROCESSING = "processing"
    RENTED = "rented"
    RETURNED = "returned"
