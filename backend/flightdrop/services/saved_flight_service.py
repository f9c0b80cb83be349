"""Saved flight service: a user's saved offers with their price trends."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flightdrop.models.saved_flight import SavedFlight
from flightdrop.services.offer_normalizer import MISSING, format_duration
from flightdrop.services.trend_advisor import describe_trend
from flightdrop.services.trend_generator import TrendSource, trend_source

logger = logging.getLogger(__name__)


def _known(value: str | None) -> str | None:
    return None if value in (None, "", MISSING) else value


def _leg_document(
    departure_time: str | None,
    arrival_time: str | None,
    departure_airport: str | None,
    arrival_airport: str | None,
) -> dict:
    departure_time = _known(departure_time)
    arrival_time = _known(arrival_time)
    return {
        "time": departure_time,
        "arrive": arrival_time,
        "duration": format_duration(departure_time, arrival_time),
        "from": _known(departure_airport),
        "to": _known(arrival_airport),
    }


class SavedFlightService:
    """Create, list, update and delete saved flights for one user at a time."""

    def __init__(self, trends: TrendSource = trend_source):
        self.trends = trends

    async def create_flight(
        self,
        db: AsyncSession,
        user_id: str,
        offer: dict,
        trend: list[dict] | None = None,
    ) -> dict:
        """Snapshot a normalized offer. Generates a trend when none is given."""
        price = float(offer.get("price") or 0)
        if not trend:
            trend = self.trends.trend_for(price)

        return_leg = offer.get("return_leg")
        flight = SavedFlight(
            user_id=user_id,
            airline=offer.get("airline_name") or MISSING,
            airline_logo_url=offer.get("airline_logo_url"),
            flight_number=_known(offer.get("flight_number")),
            carrier_code=_known(offer.get("carrier_code")),
            price=Decimal(str(price)),
            currency=offer.get("currency") or "GBP",
            depart=_leg_document(
                offer.get("departure_time"),
                offer.get("arrival_time"),
                offer.get("departure_airport"),
                offer.get("arrival_airport"),
            ),
            return_leg=_leg_document(
                return_leg.get("departure_time"),
                return_leg.get("arrival_time"),
                return_leg.get("departure_airport"),
                return_leg.get("arrival_airport"),
            ) if return_leg else None,
            trend=[{"date": str(p["date"]), "price": float(p["price"])} for p in trend],
            notifications=False,
        )
        db.add(flight)
        await db.commit()
        await db.refresh(flight)

        logger.info(f"Saved flight {flight.id} for user {user_id} ({flight.airline} at {price})")
        return self._flight_to_dict(flight)

    async def list_flights(self, db: AsyncSession, user_id: str) -> list[dict]:
        result = await db.execute(
            select(SavedFlight)
            .where(SavedFlight.user_id == user_id)
            .order_by(SavedFlight.created_at.desc())
        )
        return [self._flight_to_dict(f) for f in result.scalars().all()]

    async def get_flight(
        self, db: AsyncSession, user_id: str, flight_id: uuid.UUID
    ) -> dict | None:
        flight = await self._get_owned(db, user_id, flight_id)
        return self._flight_to_dict(flight) if flight else None

    async def delete_flight(
        self, db: AsyncSession, user_id: str, flight_id: uuid.UUID
    ) -> bool:
        flight = await self._get_owned(db, user_id, flight_id)
        if not flight:
            return False

        await db.delete(flight)
        await db.commit()
        logger.info(f"Deleted saved flight {flight_id} for user {user_id}")
        return True

    async def set_notifications(
        self, db: AsyncSession, user_id: str, flight_id: uuid.UUID, enabled: bool
    ) -> dict | None:
        """Set notifications to an explicit state. None if the flight is not found."""
        flight = await self._get_owned(db, user_id, flight_id)
        if not flight:
            return None

        flight.notifications = enabled
        await db.commit()
        await db.refresh(flight)
        return self._flight_to_dict(flight)

    async def toggle_notifications(
        self, db: AsyncSession, user_id: str, flight_id: uuid.UUID
    ) -> dict | None:
        """Flip the stored notifications flag."""
        flight = await self._get_owned(db, user_id, flight_id)
        if not flight:
            return None

        flight.notifications = not flight.notifications
        await db.commit()
        await db.refresh(flight)
        return self._flight_to_dict(flight)

    @staticmethod
    async def _get_owned(
        db: AsyncSession, user_id: str, flight_id: uuid.UUID
    ) -> SavedFlight | None:
        result = await db.execute(
            select(SavedFlight).where(
                SavedFlight.id == flight_id,
                SavedFlight.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    def _flight_to_dict(self, flight: SavedFlight) -> dict:
        price = float(flight.price)
        # Records saved without history get a display-only synthetic trend
        trend = flight.trend or self.trends.trend_for(price)
        return {
            "id": str(flight.id),
            "user_id": flight.user_id,
            "airline": flight.airline,
            "airline_logo_url": flight.airline_logo_url,
            "flight_number": flight.flight_number,
            "carrier_code": flight.carrier_code,
            "price": price,
            "currency": flight.currency,
            "depart": flight.depart,
            "return": flight.return_leg,
            "trend": trend,
            "notifications": flight.notifications,
            "created_at": flight.created_at.isoformat() if flight.created_at else None,
            **describe_trend(trend),
        }


saved_flight_service = SavedFlightService()
