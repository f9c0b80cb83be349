"""Synthetic price trends for saved flights.

Placeholder until real price history is collected: the trend is the current
price with uniform noise on the preceding days. Anything producing
``[{"date": "YYYY-MM-DD", "price": number}, ...]`` can stand in for
``SyntheticTrendSource``; the advisor does not care where points come from.
"""

import random
from datetime import date, timedelta
from typing import Protocol

from flightdrop.config import settings


class TrendSource(Protocol):
    def trend_for(self, current_price: float, today: date | None = None) -> list[dict]: ...


def generate_trend(
    current_price: float,
    days: int = 7,
    noise: float = 10.0,
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[dict]:
    """Build ``days + 1`` daily points ending today at exactly ``current_price``.

    Each prior day is ``round(current_price + U[-noise, noise])``.
    """
    rng = rng or random.Random()
    today = today or date.today()

    trend = []
    for offset in range(days, 0, -1):
        day = today - timedelta(days=offset)
        trend.append({
            "date": day.isoformat(),
            "price": round(current_price + rng.uniform(-noise, noise)),
        })

    trend.append({"date": today.isoformat(), "price": current_price})
    return trend


class SyntheticTrendSource:
    """Synthetic daily history around the current price."""

    def __init__(
        self,
        rng: random.Random | None = None,
        days: int | None = None,
        noise: float | None = None,
    ):
        self.rng = rng or random.Random()
        self.days = days if days is not None else settings.trend_history_days
        self.noise = noise if noise is not None else settings.trend_noise

    def trend_for(self, current_price: float, today: date | None = None) -> list[dict]:
        return generate_trend(
            current_price,
            days=self.days,
            noise=self.noise,
            rng=self.rng,
            today=today,
        )


trend_source = SyntheticTrendSource()
