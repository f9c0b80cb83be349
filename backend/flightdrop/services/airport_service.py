"""Airport service: autocomplete over the bundled airport list."""

import logging

from flightdrop.data.airports import AIRPORTS

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class AirportService:
    """Matches airports by city, IATA code, or airport name."""

    def __init__(self, airports: list[tuple[str, str, str, str]] = AIRPORTS):
        self._airports = [
            {
                "iata": iata,
                "name": name,
                "city": city,
                "country": country,
                "label": f"{city} ({iata})",
            }
            for iata, name, city, country in airports
        ]

    def search_airports(self, query: str, limit: int = 5) -> list[dict]:
        """Search airports; queries shorter than two characters match nothing."""
        q = query.strip()
        if len(q) < MIN_QUERY_LENGTH:
            return []

        # Exact IATA match first
        code = q.upper()
        exact = [a for a in self._airports if a["iata"] == code]

        q_lower = q.lower()
        fuzzy = [
            a for a in self._airports
            if a["iata"] != code
            and q_lower in f"{a['city']} {a['iata']} {a['name']}".lower()
        ]
        return (exact + fuzzy)[:limit]

    def get_airport(self, iata: str) -> dict | None:
        code = iata.strip().upper()
        return next((a for a in self._airports if a["iata"] == code), None)


airport_service = AirportService()
