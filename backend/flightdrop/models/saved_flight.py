import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, Boolean, DateTime, Index, Numeric, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from flightdrop.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class SavedFlight(Base):
    __tablename__ = "saved_flights"
    __table_args__ = (Index("idx_saved_flights_user", "user_id", "created_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(100), nullable=False)
    airline: Mapped[str] = mapped_column(String(200), nullable=False)
    airline_logo_url: Mapped[str | None] = mapped_column(String(500))
    flight_number: Mapped[str | None] = mapped_column(String(20))
    carrier_code: Mapped[str | None] = mapped_column(String(10))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="GBP")
    depart: Mapped[dict] = mapped_column(JSONType, nullable=False)
    return_leg: Mapped[dict | None] = mapped_column("return", JSONType)
    trend: Mapped[list] = mapped_column(JSONType, default=list)
    notifications: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
