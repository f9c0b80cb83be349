"""Booking.com flights client: thin adapter over the RapidAPI search endpoints.

Returns the raw ``flightOffers`` list untouched; shaping happens in the
offer normalizer. Failures are surfaced once as ``FlightSearchError`` with
no retries.
"""

import json
import logging
from datetime import date
from typing import Any

import httpx

from flightdrop.config import settings

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/v1/flights/searchFlights"
MULTI_STOP_PATH = "/api/v1/flights/searchFlightsMultiStops"

UPSTREAM_SORTS = ("BEST", "CHEAPEST", "FASTEST")


class FlightSearchError(Exception):
    """The upstream flights API failed or answered with something unusable."""

    def __init__(self, message: str, upstream_status: int | None = None, details: Any = None):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.details = details


def airport_id(code: str) -> str:
    """Booking.com location id for an IATA airport code."""
    return f"{code.strip().upper()}.AIRPORT"


class BookingClient:
    """Adapter for the Booking.com flights API on RapidAPI."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        host: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.rapidapi_key
        self._base_url = base_url or settings.booking_base_url
        self._host = host or settings.rapidapi_host
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=settings.booking_timeout_seconds,
                transport=self._transport,
                headers={
                    "x-rapidapi-key": self._api_key,
                    "x-rapidapi-host": self._host,
                },
            )
        return self._client

    async def search_flights(
        self,
        origin: str,
        destination: str,
        depart_date: date,
        return_date: date | None = None,
        adults: int = 1,
        sort: str = "BEST",
        page_no: int = 1,
        cabin_class: str | None = None,
        currency: str | None = None,
    ) -> list[dict]:
        """Search one-way or return flights. Returns raw flight offers."""
        params = {
            "fromId": airport_id(origin),
            "toId": airport_id(destination),
            "departDate": depart_date.isoformat(),
            "pageNo": str(page_no),
            "adults": str(adults),
            "sort": sort,
            "cabinClass": cabin_class or settings.cabin_class,
            "currency_code": currency or settings.default_currency,
        }
        if return_date:
            params["returnDate"] = return_date.isoformat()

        return await self._fetch_offers(SEARCH_PATH, params)

    async def search_flights_multi(
        self,
        legs: list[dict],
        adults: int = 1,
        children: int = 0,
        sort: str = "BEST",
        page_no: int = 1,
        cabin_class: str | None = None,
        currency: str | None = None,
    ) -> list[dict]:
        """Search a multi-city itinerary. ``legs`` are ``{fromId, toId, date}`` dicts."""
        params = {
            "legs": json.dumps(legs),
            "pageNo": str(page_no),
            "adults": str(adults),
            "children": str(children),
            "sort": sort,
            "cabinClass": cabin_class or settings.cabin_class,
            "currency_code": currency or settings.default_currency,
        }
        return await self._fetch_offers(MULTI_STOP_PATH, params)

    async def _fetch_offers(self, path: str, params: dict) -> list[dict]:
        client = await self._get_client()

        try:
            resp = await client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f"No response received from flights API: {e}")
            raise FlightSearchError("No response received from flights API") from e

        if resp.is_error:
            try:
                details = resp.json()
            except ValueError:
                details = resp.text
            logger.error(f"Flights API error: status={resp.status_code} details={details}")
            raise FlightSearchError(
                "Flights API responded with an error",
                upstream_status=resp.status_code,
                details=details,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            logger.error("Flights API returned a non-JSON body")
            raise FlightSearchError("Malformed response from flights API") from e

        if not isinstance(payload, dict):
            logger.error(f"Flights API returned unexpected payload type {type(payload).__name__}")
            raise FlightSearchError("Malformed response from flights API")

        if payload.get("status") is False:
            message = payload.get("message") or "Flights API reported a failure"
            logger.error(f"Flights API reported failure: {message}")
            raise FlightSearchError(str(message), details=payload.get("message"))

        data = payload.get("data")
        offers = data.get("flightOffers") if isinstance(data, dict) else None
        if not isinstance(offers, list):
            return []
        return offers

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


booking_client = BookingClient()
