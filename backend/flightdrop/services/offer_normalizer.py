"""Offer normalizer: flattens Booking.com flight offers into comparable cards.

The upstream payload is untrusted. Every lookup tolerates missing keys and
wrong types and falls back to a sentinel, so one malformed offer degrades
field by field instead of hiding the rest of the batch.

Normalized offers are plain dicts:

    id, airline_name, airline_logo_url, flight_number, carrier_code,
    departure_airport, arrival_airport, departure_time, arrival_time,
    duration, price, currency, return_leg
"""

import logging
import math
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

MISSING = "N/A"
DEFAULT_CURRENCY = "GBP"

SORT_CHEAPEST = "cheapest"
SORT_FASTEST = "fastest"
SORT_DEPARTURE = "departure"
SORT_OPTIONS = (SORT_CHEAPEST, SORT_FASTEST, SORT_DEPARTURE)


def _get(obj: Any, *path: str | int) -> Any:
    """Walk dict keys and list indexes, returning None on the first miss."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(obj, list) or key >= len(obj):
                return None
            obj = obj[key]
        else:
            if not isinstance(obj, dict):
                return None
            obj = obj.get(key)
        if obj is None:
            return None
    return obj


def _text(value: Any) -> str | None:
    """Coerce an upstream scalar to a non-empty string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, int):
        return str(value)
    return None


def first_match(*lookups: Callable[[], Any]) -> Any:
    """Evaluate lookups in order and return the first truthy result.

    Later lookups are never called once one succeeds. Returns None when
    nothing resolves.
    """
    for lookup in lookups:
        value = lookup()
        if value:
            return value
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp. Naive values are read as UTC."""
    if not isinstance(value, str) or not value or value == MISSING:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def flight_seconds(departure_time: Any, arrival_time: Any) -> float | None:
    """Seconds between departure and arrival, or None unless strictly positive."""
    departure = parse_timestamp(departure_time)
    arrival = parse_timestamp(arrival_time)
    if departure is None or arrival is None:
        return None
    seconds = (arrival - departure).total_seconds()
    if seconds <= 0:
        return None
    return seconds


def format_duration(departure_time: Any, arrival_time: Any) -> str | None:
    """Render a flight duration as "{hours}h {minutes}m"."""
    seconds = flight_seconds(departure_time, arrival_time)
    if seconds is None:
        return None
    total_minutes = int(seconds // 60)
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def coerce_price(value: Any) -> float:
    """Numeric price from an upstream value; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(price) or price < 0:
        return 0.0
    return price


def _leg_summary(segment: Any) -> dict:
    departure_time = _text(_get(segment, "departureTime"))
    arrival_time = _text(_get(segment, "arrivalTime"))
    return {
        "departure_airport": _text(_get(segment, "departureAirport", "code")),
        "arrival_airport": _text(_get(segment, "arrivalAirport", "code")),
        "departure_time": departure_time,
        "arrival_time": arrival_time,
        "duration": format_duration(departure_time, arrival_time),
    }


def normalize_offer(raw: Any, index: int = 0) -> dict:
    """Flatten one raw offer. Never raises on malformed input."""
    segment = _get(raw, "segments", 0)
    leg = _get(segment, "legs", 0)
    return_segment = _get(raw, "segments", 1)

    raw_carrier_code = _text(_get(leg, "flightInfo", "carrierInfo", "marketingCarrier"))

    airline_name = first_match(
        lambda: _text(_get(leg, "carriersData", 0, "name")),
        lambda: _text(_get(segment, "carriersData", 0, "name")),
        lambda: raw_carrier_code,
    ) or MISSING
    airline_logo_url = first_match(
        lambda: _text(_get(leg, "carriersData", 0, "logo")),
        lambda: _text(_get(segment, "carriersData", 0, "logo")),
    )

    departure_time = _text(_get(segment, "departureTime")) or MISSING
    arrival_time = _text(_get(segment, "arrivalTime")) or MISSING

    total = _get(raw, "priceBreakdown", "total")

    return {
        "id": _text(_get(raw, "id")) or _text(_get(raw, "token")) or str(index),
        "airline_name": airline_name,
        "airline_logo_url": airline_logo_url,
        "flight_number": _text(_get(leg, "flightInfo", "flightNumber")) or MISSING,
        "carrier_code": raw_carrier_code or MISSING,
        "departure_airport": _text(_get(segment, "departureAirport", "code")) or MISSING,
        "arrival_airport": _text(_get(segment, "arrivalAirport", "code")) or MISSING,
        "departure_time": departure_time,
        "arrival_time": arrival_time,
        "duration": format_duration(departure_time, arrival_time),
        "price": coerce_price(_get(total, "units")),
        "currency": _text(_get(total, "currencyCode")) or DEFAULT_CURRENCY,
        "return_leg": _leg_summary(return_segment) if return_segment is not None else None,
    }


def dedupe_offers(offers: Iterable[dict]) -> list[dict]:
    """Keep the cheapest offer per (carrier_code, departure_time).

    Ties keep the first offer seen; output follows first-seen key order.
    """
    best: dict[tuple[str, str], dict] = {}
    for offer in offers:
        key = (offer["carrier_code"], offer["departure_time"])
        current = best.get(key)
        if current is None or offer["price"] < current["price"]:
            best[key] = offer
    return list(best.values())


def normalize_offers(raw_offers: Iterable[Any] | None) -> list[dict]:
    """Normalize and deduplicate a batch of raw offers."""
    if not raw_offers:
        return []
    normalized = [normalize_offer(raw, index) for index, raw in enumerate(raw_offers)]
    unique = dedupe_offers(normalized)
    if len(unique) < len(normalized):
        logger.debug(f"Dropped {len(normalized) - len(unique)} duplicate offers")
    return unique


def _missing_last(value: Any) -> tuple:
    return (value is None, value if value is not None else 0)


def sort_offers(offers: Iterable[dict], option: str | None) -> list[dict]:
    """Sort normalized offers by a caller-selected option.

    cheapest: ascending price. fastest: ascending flight time computed from
    the timestamps. departure: ascending departure timestamp. Offers whose
    timestamps do not parse go last. Unknown options keep the input order.
    """
    offers = list(offers)
    option = (option or "").strip().lower()

    if option == SORT_CHEAPEST:
        return sorted(offers, key=lambda o: o["price"])
    if option == SORT_FASTEST:
        return sorted(
            offers,
            key=lambda o: _missing_last(flight_seconds(o["departure_time"], o["arrival_time"])),
        )
    if option == SORT_DEPARTURE:
        return sorted(offers, key=lambda o: _missing_last(parse_timestamp(o["departure_time"])))
    return offers
