# app/services/exceptions.py
"""
Domain errors raised by services and repositories.
Mapped to HTTP responses by the handlers registered in app.main.
"""


class FleetDomainError(Exception):
    """Base class for all truck domain errors."""


class TruckNotFoundError(FleetDomainError):
    """Raised when no truck exists with the requested id."""

    def __init__(self, truck_id: int, message: str = None):
        self.truck_id = truck_id
        super().__init__(message or f"Truck not found with ID :{truck_id}")


class InvalidTruckStatusError(FleetDomainError):
    """Raised when a status string matches none of ACTIVE, IN_MAINTENANCE, RETIRED."""

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Invalid truck status: '{raw}'")


class InvalidSortError(FleetDomainError):
    """Raised when a sort field or direction cannot be applied to trucks."""

    def __init__(self, raw, reason: str = "unsupported sort"):
        self.raw = raw
        super().__init__(f"Invalid sort '{raw}': {reason}")


class AuthError(Exception):
    """Base class for authentication subsystem errors."""


class UserNotFoundError(AuthError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User not found with username: {username}")
