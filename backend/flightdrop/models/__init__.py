from flightdrop.models.saved_flight import SavedFlight

__all__ = [
    "SavedFlight",
]
