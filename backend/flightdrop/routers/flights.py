"""Flights router: search pass-through and saved flight management."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flightdrop.database import get_db
from flightdrop.dependencies import get_booking_client, get_current_user
from flightdrop.schemas.flight import NotificationUpdate, SaveFlightRequest
from flightdrop.services.booking_client import BookingClient, FlightSearchError
from flightdrop.services.saved_flight_service import saved_flight_service
from flightdrop.services.search_orchestrator import search_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


def _search_failed(e: FlightSearchError) -> HTTPException:
    return HTTPException(
        status_code=502,
        detail={
            "error": "Flight search failed",
            "message": str(e),
            "upstream_status": e.upstream_status,
            "details": e.details,
        },
    )


@router.get("/search")
async def search_flights(
    origin: str | None = Query(None, description="Origin IATA code"),
    destination: str | None = Query(None, description="Destination IATA code"),
    date: str | None = Query(None, description="Departure date (YYYY-MM-DD)"),
    return_date: str | None = Query(None, alias="returnDate"),
    adults: int = Query(1),
    sort: str = Query("BEST", description="Upstream ordering: BEST, CHEAPEST, FASTEST"),
    page_no: int = Query(1, alias="pageNo", ge=1),
    sort_by: str = Query("cheapest", alias="sortBy", description="cheapest, fastest, departure"),
    client: BookingClient = Depends(get_booking_client),
):
    """Search flights and return normalized, deduplicated, sorted offers."""
    try:
        return await search_orchestrator.search(
            client,
            origin=origin,
            destination=destination,
            depart_date=date,
            return_date=return_date,
            adults=adults,
            sort=sort,
            page_no=page_no,
            sort_by=sort_by,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FlightSearchError as e:
        raise _search_failed(e)


@router.get("/search/multi")
async def search_flights_multi(
    legs: str | None = Query(None, description='JSON array of {"fromId", "toId", "date"}'),
    adults: int = Query(1),
    children: int = Query(0),
    sort: str = Query("BEST"),
    page_no: int = Query(1, alias="pageNo", ge=1),
    cabin_class: str | None = Query(None, alias="cabinClass"),
    currency: str | None = Query(None),
    sort_by: str = Query("cheapest", alias="sortBy"),
    client: BookingClient = Depends(get_booking_client),
):
    """Search a multi-city itinerary."""
    try:
        return await search_orchestrator.search_multi(
            client,
            raw_legs=legs,
            adults=adults,
            children=children,
            sort=sort,
            page_no=page_no,
            cabin_class=cabin_class,
            currency=currency,
            sort_by=sort_by,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FlightSearchError as e:
        raise _search_failed(e)


@router.get("")
async def list_saved_flights(
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    """List the user's saved flights with trend suggestions."""
    try:
        return await saved_flight_service.list_flights(db, user)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch flights for {user}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch flights")


@router.post("", status_code=201)
async def save_flight(
    req: SaveFlightRequest,
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    """Save an offer to the user's list."""
    trend = [p.model_dump() for p in req.trend] if req.trend else None
    try:
        return await saved_flight_service.create_flight(
            db, user, req.offer.model_dump(), trend=trend
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to add flight for {user}: {e}")
        raise HTTPException(status_code=500, detail="Failed to add flight")


@router.get("/{flight_id}")
async def get_saved_flight(
    flight_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    try:
        flight = await saved_flight_service.get_flight(db, user, flight_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch flight {flight_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch flight")
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight


@router.delete("/{flight_id}")
async def delete_saved_flight(
    flight_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    """Delete a saved flight."""
    try:
        deleted = await saved_flight_service.delete_flight(db, user, flight_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete flight {flight_id}: {e}")
        raise HTTPException(status_code=500, detail="Delete failed")
    if not deleted:
        raise HTTPException(status_code=404, detail="Flight not found")
    return {"message": "Flight deleted"}


@router.put("/{flight_id}")
async def update_notifications(
    flight_id: uuid.UUID,
    req: NotificationUpdate,
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    """Set notifications on a saved flight to the requested state."""
    try:
        flight = await saved_flight_service.set_notifications(
            db, user, flight_id, req.notifications
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to update notifications for {flight_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update notifications")
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight


@router.post("/{flight_id}/notifications/toggle")
async def toggle_notifications(
    flight_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: str = Depends(get_current_user),
):
    """Flip notifications on a saved flight."""
    try:
        flight = await saved_flight_service.toggle_notifications(db, user, flight_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to toggle notifications for {flight_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to toggle notifications")
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight
