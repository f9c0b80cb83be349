import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RAPIDAPI_KEY", "test-key")

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

import flightdrop.models  # noqa: E402,F401
from flightdrop.database import Base, get_db  # noqa: E402
from flightdrop.dependencies import get_booking_client, get_current_user  # noqa: E402
from flightdrop.main import app  # noqa: E402
from flightdrop.services.booking_client import BookingClient  # noqa: E402

TEST_USER = "tester"


def build_segment(
    departure="2024-01-01T10:00:00Z",
    arrival="2024-01-01T12:30:00Z",
    origin="LHR",
    destination="CDG",
    carrier="BA",
    carrier_name="British Airways",
    flight_number=304,
):
    leg = {
        "flightInfo": {
            "flightNumber": flight_number,
            "carrierInfo": {"marketingCarrier": carrier, "operatingCarrier": carrier},
        },
        "carriersData": [
            {"name": carrier_name, "code": carrier, "logo": f"https://logos.test/{carrier}.png"}
        ] if carrier_name else [],
    }
    return {
        "departureAirport": {"code": origin, "name": f"{origin} airport"},
        "arrivalAirport": {"code": destination, "name": f"{destination} airport"},
        "departureTime": departure,
        "arrivalTime": arrival,
        "legs": [leg],
    }


def build_offer(offer_id="offer-1", price=100, currency="GBP", segments=None, **segment_kwargs):
    """A Booking.com style raw flight offer."""
    return {
        "id": offer_id,
        "segments": segments if segments is not None else [build_segment(**segment_kwargs)],
        "priceBreakdown": {"total": {"units": price, "nanos": 0, "currencyCode": currency}},
    }


class FakeUpstream:
    """Records requests to the flights API and replies with a canned payload."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {"status": True, "message": "Success", "data": {"flightOffers": []}}
        self.client = BookingClient(
            api_key="test-key",
            base_url="https://upstream.test",
            host="upstream.test",
            transport=httpx.MockTransport(self.handle),
        )

    def reply_with_offers(self, offers):
        self.payload = {"status": True, "message": "Success", "data": {"flightOffers": offers}}

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'flightdrop.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory, upstream):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_current_user():
        return TEST_USER

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_booking_client] = lambda: upstream.client
    app.dependency_overrides[get_current_user] = override_get_current_user

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await upstream.client.close()
