"""Search orchestrator: validates a search, calls the flights API, shapes the offers."""

import json
import logging
import re
from datetime import date

from flightdrop.services.booking_client import UPSTREAM_SORTS, BookingClient, airport_id
from flightdrop.services.offer_normalizer import SORT_CHEAPEST, normalize_offers, sort_offers

logger = logging.getLogger(__name__)

IATA_RE = re.compile(r"^[A-Za-z]{3}$")
MAX_PASSENGERS = 9


def _parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid {field}: use YYYY-MM-DD")


def _check_airport(code: str, field: str) -> str:
    code = code.strip()
    if not IATA_RE.match(code):
        raise ValueError(f"Invalid {field}: expected a 3-letter IATA airport code")
    return code.upper()


def _check_upstream_sort(sort: str | None) -> str:
    sort = (sort or "BEST").strip().upper()
    if sort not in UPSTREAM_SORTS:
        raise ValueError(f"Invalid sort: expected one of {', '.join(UPSTREAM_SORTS)}")
    return sort


def _check_passengers(count: int, field: str, minimum: int) -> int:
    if count < minimum or count > MAX_PASSENGERS:
        raise ValueError(f"Invalid {field}: must be between {minimum} and {MAX_PASSENGERS}")
    return count


def parse_legs(raw_legs: str | None) -> list[dict]:
    """Parse and validate the JSON ``legs`` parameter of a multi-city search."""
    if not raw_legs:
        raise ValueError("Missing required query parameter: legs")
    try:
        legs = json.loads(raw_legs)
    except ValueError:
        raise ValueError("Invalid JSON for legs parameter")
    if not isinstance(legs, list) or not legs:
        raise ValueError("Invalid legs format: must be a non-empty array")

    parsed = []
    for i, leg in enumerate(legs):
        if not isinstance(leg, dict):
            raise ValueError(f"Invalid leg {i}: must be an object")
        missing = [k for k in ("fromId", "toId", "date") if not leg.get(k)]
        if missing:
            raise ValueError(f"Invalid leg {i}: missing {', '.join(missing)}")
        from_id = str(leg["fromId"]).strip()
        to_id = str(leg["toId"]).strip()
        parsed.append({
            "fromId": airport_id(from_id) if IATA_RE.match(from_id) else from_id,
            "toId": airport_id(to_id) if IATA_RE.match(to_id) else to_id,
            "date": _parse_date(str(leg["date"]), f"date in leg {i}").isoformat(),
        })
    return parsed


def _summarize(query: dict, offers: list[dict]) -> dict:
    prices = [o["price"] for o in offers if o["price"] > 0]
    return {
        "query": query,
        "offers": offers,
        "count": len(offers),
        "min_price": min(prices) if prices else None,
        "max_price": max(prices) if prices else None,
    }


class SearchOrchestrator:
    """Runs validated searches against the flights API."""

    async def search(
        self,
        client: BookingClient,
        origin: str | None,
        destination: str | None,
        depart_date: str | None,
        return_date: str | None = None,
        adults: int = 1,
        sort: str | None = "BEST",
        page_no: int = 1,
        sort_by: str | None = SORT_CHEAPEST,
    ) -> dict:
        """Search offers for a route.

        Raises ValueError for invalid input before any upstream call, and
        lets FlightSearchError from the client propagate.
        """
        if not origin or not destination or not depart_date:
            raise ValueError("Missing required query parameters: origin, destination, date")

        origin = _check_airport(origin, "origin")
        destination = _check_airport(destination, "destination")
        if origin == destination:
            raise ValueError("Origin and destination airports cannot be the same")

        departure = _parse_date(depart_date, "date")
        returning = _parse_date(return_date, "returnDate") if return_date else None
        if returning and returning < departure:
            raise ValueError("Return date must be on or after the departure date")

        adults = _check_passengers(adults, "adults", 1)
        sort = _check_upstream_sort(sort)

        logger.info(f"Searching flights {origin} -> {destination} on {departure} (return {returning})")

        raw_offers = await client.search_flights(
            origin=origin,
            destination=destination,
            depart_date=departure,
            return_date=returning,
            adults=adults,
            sort=sort,
            page_no=page_no,
        )
        offers = sort_offers(normalize_offers(raw_offers), sort_by)
        logger.info(f"Found {len(offers)} unique offers from {len(raw_offers)} raw offers")

        return _summarize(
            {
                "origin": origin,
                "destination": destination,
                "date": departure.isoformat(),
                "return_date": returning.isoformat() if returning else None,
                "adults": adults,
                "sort": sort,
                "page_no": page_no,
                "sort_by": sort_by,
            },
            offers,
        )

    async def search_multi(
        self,
        client: BookingClient,
        raw_legs: str | None,
        adults: int = 1,
        children: int = 0,
        sort: str | None = "BEST",
        page_no: int = 1,
        cabin_class: str | None = None,
        currency: str | None = None,
        sort_by: str | None = SORT_CHEAPEST,
    ) -> dict:
        """Search a multi-city itinerary described by a JSON ``legs`` array."""
        legs = parse_legs(raw_legs)
        adults = _check_passengers(adults, "adults", 1)
        children = _check_passengers(children, "children", 0)
        sort = _check_upstream_sort(sort)

        logger.info(f"Searching multi-city flights over {len(legs)} legs")

        raw_offers = await client.search_flights_multi(
            legs=legs,
            adults=adults,
            children=children,
            sort=sort,
            page_no=page_no,
            cabin_class=cabin_class,
            currency=currency,
        )
        offers = sort_offers(normalize_offers(raw_offers), sort_by)

        return _summarize(
            {
                "legs": legs,
                "adults": adults,
                "children": children,
                "sort": sort,
                "page_no": page_no,
                "sort_by": sort_by,
            },
            offers,
        )


search_orchestrator = SearchOrchestrator()
