"""Request-scoped dependencies shared by the routers."""

from flightdrop.config import settings
from flightdrop.services.booking_client import BookingClient, booking_client


async def get_current_user() -> str:
    """Return the id of the user the request acts for.

    No authentication yet: every request runs as the configured default user.
    """
    return settings.default_user


def get_booking_client() -> BookingClient:
    """Flights API client used by the search endpoints."""
    return booking_client
