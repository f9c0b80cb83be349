"""Airport search router: autocomplete for the search form."""

from fastapi import APIRouter, HTTPException, Query

from flightdrop.services.airport_service import airport_service

router = APIRouter()


@router.get("/search")
async def search_airports(
    q: str = Query(..., min_length=1),
    limit: int = Query(5, ge=1, le=20),
):
    """Search airports by city, IATA code, or airport name."""
    return airport_service.search_airports(q, limit)


@router.get("/{iata}")
async def get_airport(iata: str):
    airport = airport_service.get_airport(iata)
    if not airport:
        raise HTTPException(status_code=404, detail="Airport not found")
    return airport
