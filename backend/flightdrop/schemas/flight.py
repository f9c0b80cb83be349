from datetime import date as date_type

from pydantic import BaseModel, Field

# Numeric(10, 2) on saved_flights.price
MAX_PRICE = 99_999_999.99


class LegSnapshot(BaseModel):
    departure_airport: str | None = Field(None, max_length=10)
    arrival_airport: str | None = Field(None, max_length=10)
    departure_time: str | None = Field(None, max_length=40)
    arrival_time: str | None = Field(None, max_length=40)
    duration: str | None = Field(None, max_length=20)


class FlightOfferSnapshot(BaseModel):
    """A normalized offer as returned by the search endpoint."""
    id: str | None = Field(None, max_length=200)
    airline_name: str = Field("N/A", max_length=200)
    airline_logo_url: str | None = Field(None, max_length=500)
    flight_number: str | None = Field(None, max_length=20)
    carrier_code: str | None = Field(None, max_length=10)
    departure_airport: str | None = Field(None, max_length=10)
    arrival_airport: str | None = Field(None, max_length=10)
    departure_time: str | None = Field(None, max_length=40)
    arrival_time: str | None = Field(None, max_length=40)
    duration: str | None = Field(None, max_length=20)
    price: float = Field(..., ge=0, le=MAX_PRICE, allow_inf_nan=False)
    currency: str = Field("GBP", min_length=3, max_length=3)
    return_leg: LegSnapshot | None = None


class TrendPoint(BaseModel):
    date: date_type
    price: float = Field(..., ge=0, allow_inf_nan=False)


class SaveFlightRequest(BaseModel):
    offer: FlightOfferSnapshot
    # Omitted: a synthetic trend is generated from the offer price
    trend: list[TrendPoint] | None = None


class NotificationUpdate(BaseModel):
    notifications: bool
