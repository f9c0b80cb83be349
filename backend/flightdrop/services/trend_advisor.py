"""Trend advisor: maps the slope of recent prices to a buy/wait suggestion.

The slope is an ordinary least-squares fit of price against point index over
the most recent points. Calendar distance between points is ignored.
"""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Points used for the regression window
WINDOW_SIZE = 5
MIN_POINTS = 2

# Price units per index step separating "stable" from "trending"
SLOPE_THRESHOLD = 0.2


class Suggestion(str, Enum):
    BUY_NOW = "buy_now"
    WAIT = "wait"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


SUGGESTION_MESSAGES: dict[Suggestion, str] = {
    Suggestion.BUY_NOW: "prices trending up, recommend buying now",
    Suggestion.WAIT: "prices trending down, recommend waiting",
    Suggestion.STABLE: "prices stable, no urgency.",
    Suggestion.INSUFFICIENT_DATA: "not enough price data for a suggestion",
}


def _price(point: Any) -> float:
    if isinstance(point, Mapping):
        return float(point["price"])
    return float(point.price)


def regression_slope(prices: Sequence[float]) -> float:
    """OLS slope of prices against their index 0..n-1.

    Returns 0 when the denominator vanishes (fewer than two points).
    """
    n = len(prices)
    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for x, y in enumerate(prices):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return (n * sum_xy - sum_x * sum_y) / denominator


def get_price_suggestion(trend: Sequence[Any] | None) -> Suggestion:
    """Suggest buying, waiting or neither from a chronological price trend.

    Points may be dicts with a ``price`` key or objects with a ``price``
    attribute. Short input yields ``INSUFFICIENT_DATA`` rather than an error.
    """
    if not trend or len(trend) < MIN_POINTS:
        return Suggestion.INSUFFICIENT_DATA

    window = [_price(point) for point in list(trend)[-WINDOW_SIZE:]]
    slope = regression_slope(window)

    if slope > SLOPE_THRESHOLD:
        return Suggestion.BUY_NOW
    if slope < -SLOPE_THRESHOLD:
        return Suggestion.WAIT
    return Suggestion.STABLE


def describe_trend(trend: Sequence[Any] | None) -> dict:
    """Suggestion plus its display message, as returned by the API."""
    suggestion = get_price_suggestion(trend)
    return {
        "suggestion": suggestion.value,
        "suggestion_message": SUGGESTION_MESSAGES[suggestion],
    }
