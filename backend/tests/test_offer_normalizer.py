from conftest import build_offer, build_segment

from flightdrop.services.offer_normalizer import (
    MISSING,
    coerce_price,
    dedupe_offers,
    first_match,
    format_duration,
    normalize_offer,
    normalize_offers,
    sort_offers,
)


def test_duration_renders_hours_and_minutes():
    assert format_duration("2024-01-01T10:00:00Z", "2024-01-01T12:30:00Z") == "2h 30m"


def test_duration_spanning_days():
    assert format_duration("2024-01-01T22:15:00", "2024-01-03T01:20:00") == "27h 5m"


def test_duration_undefined_when_arrival_precedes_departure():
    assert format_duration("2024-01-01T12:30:00Z", "2024-01-01T10:00:00Z") is None


def test_duration_undefined_for_zero_or_unparseable_interval():
    assert format_duration("2024-01-01T10:00:00Z", "2024-01-01T10:00:00Z") is None
    assert format_duration("N/A", "2024-01-01T10:00:00Z") is None
    assert format_duration(None, None) is None
    assert format_duration("yesterday", "today") is None


def test_normalize_offer_flattens_outbound_fields():
    offer = normalize_offer(build_offer(offer_id="abc", price="199", currency="EUR"))

    assert offer == {
        "id": "abc",
        "airline_name": "British Airways",
        "airline_logo_url": "https://logos.test/BA.png",
        "flight_number": "304",
        "carrier_code": "BA",
        "departure_airport": "LHR",
        "arrival_airport": "CDG",
        "departure_time": "2024-01-01T10:00:00Z",
        "arrival_time": "2024-01-01T12:30:00Z",
        "duration": "2h 30m",
        "price": 199.0,
        "currency": "EUR",
        "return_leg": None,
    }


def test_second_segment_becomes_return_leg():
    raw = build_offer(segments=[
        build_segment(),
        build_segment(
            departure="2024-01-08T18:00:00Z",
            arrival="2024-01-08T18:45:00Z",
            origin="CDG",
            destination="LHR",
        ),
    ])

    offer = normalize_offer(raw)

    assert offer["return_leg"] == {
        "departure_airport": "CDG",
        "arrival_airport": "LHR",
        "departure_time": "2024-01-08T18:00:00Z",
        "arrival_time": "2024-01-08T18:45:00Z",
        "duration": "0h 45m",
    }


def test_airline_falls_back_to_segment_carrier_data():
    raw = build_offer(carrier_name=None)
    raw["segments"][0]["carriersData"] = [{"name": "Segment Air", "logo": "https://logos.test/seg.png"}]

    offer = normalize_offer(raw)

    assert offer["airline_name"] == "Segment Air"
    assert offer["airline_logo_url"] == "https://logos.test/seg.png"


def test_airline_falls_back_to_carrier_code():
    offer = normalize_offer(build_offer(carrier="U2", carrier_name=None))

    assert offer["airline_name"] == "U2"
    assert offer["airline_logo_url"] is None


def test_airline_falls_back_to_sentinel():
    raw = build_offer(carrier_name=None)
    del raw["segments"][0]["legs"][0]["flightInfo"]["carrierInfo"]

    offer = normalize_offer(raw)

    assert offer["airline_name"] == MISSING
    assert offer["carrier_code"] == MISSING


def test_leg_carrier_wins_over_segment_carrier():
    raw = build_offer(carrier_name="Leg Air")
    raw["segments"][0]["carriersData"] = [{"name": "Segment Air"}]

    assert normalize_offer(raw)["airline_name"] == "Leg Air"


def test_first_match_stops_at_first_success():
    calls = []

    def lookup(value):
        def _lookup():
            calls.append(value)
            return value
        return _lookup

    assert first_match(lookup(None), lookup("hit"), lookup("never")) == "hit"
    assert calls == [None, "hit"]
    assert first_match(lookup(""), lookup(None)) is None


def test_price_coercion():
    assert coerce_price("250") == 250.0
    assert coerce_price(99.5) == 99.5
    assert coerce_price("abc") == 0
    assert coerce_price(None) == 0
    assert coerce_price(True) == 0
    assert coerce_price(-5) == 0
    assert coerce_price(float("nan")) == 0


def test_missing_price_breakdown_defaults_price_and_currency():
    raw = build_offer()
    del raw["priceBreakdown"]

    offer = normalize_offer(raw)

    assert offer["price"] == 0
    assert offer["currency"] == "GBP"


def test_empty_input_gives_empty_output():
    assert normalize_offers([]) == []
    assert normalize_offers(None) == []


def test_offer_without_segments_degrades_to_sentinels():
    offer = normalize_offer({"id": "broken"})

    assert offer["id"] == "broken"
    assert offer["airline_name"] == MISSING
    assert offer["flight_number"] == MISSING
    assert offer["departure_airport"] == MISSING
    assert offer["arrival_airport"] == MISSING
    assert offer["departure_time"] == MISSING
    assert offer["arrival_time"] == MISSING
    assert offer["duration"] is None
    assert offer["return_leg"] is None
    assert offer["price"] == 0


def test_malformed_offers_do_not_hide_the_rest():
    offers = normalize_offers([None, "garbage", build_offer(offer_id="good", departure="2024-01-02T08:00:00Z")])

    ids = [o["id"] for o in offers]
    assert "good" in ids
    # Both broken entries share the sentinel key, so one survives alongside the good one
    assert len(offers) == 2
    assert offers[0]["airline_name"] == MISSING


def test_missing_id_falls_back_to_index():
    raw = build_offer()
    del raw["id"]

    assert normalize_offer(raw, index=7)["id"] == "7"


def test_duplicate_flights_keep_the_cheapest():
    offers = normalize_offers([
        build_offer(offer_id="pricey", price=300),
        build_offer(offer_id="cheap", price=200),
        build_offer(offer_id="other", price=250, carrier="AF", carrier_name="Air France"),
    ])

    assert [(o["id"], o["price"]) for o in offers] == [("cheap", 200.0), ("other", 250.0)]


def test_duplicate_price_tie_keeps_first_seen():
    offers = normalize_offers([
        build_offer(offer_id="first", price=150),
        build_offer(offer_id="second", price=150),
    ])

    assert [o["id"] for o in offers] == ["first"]


def test_same_carrier_different_departure_is_not_a_duplicate():
    offers = normalize_offers([
        build_offer(offer_id="morning", departure="2024-01-01T08:00:00Z"),
        build_offer(offer_id="evening", departure="2024-01-01T20:00:00Z", arrival="2024-01-01T22:00:00Z"),
    ])

    assert len(offers) == 2


def test_dedupe_on_prebuilt_offers():
    offers = [
        {"id": "a", "carrier_code": "BA", "departure_time": "t1", "price": 120.0},
        {"id": "b", "carrier_code": "BA", "departure_time": "t1", "price": 80.0},
        {"id": "c", "carrier_code": "BA", "departure_time": "t2", "price": 90.0},
    ]

    assert [o["id"] for o in dedupe_offers(offers)] == ["b", "c"]


def _offers_for_sorting():
    return normalize_offers([
        build_offer(offer_id="slow-cheap", price=300, carrier="A1",
                    departure="2024-01-01T09:00:00Z", arrival="2024-01-01T15:00:00Z"),
        build_offer(offer_id="fast-mid", price=100, carrier="A2",
                    departure="2024-01-01T12:00:00Z", arrival="2024-01-01T13:00:00Z"),
        build_offer(offer_id="early-dear", price=200, carrier="A3",
                    departure="2024-01-01T06:00:00Z", arrival="2024-01-01T09:00:00Z"),
    ])


def test_sort_cheapest():
    prices = [o["price"] for o in sort_offers(_offers_for_sorting(), "cheapest")]
    assert prices == [100, 200, 300]


def test_sort_fastest_uses_timestamps():
    ids = [o["id"] for o in sort_offers(_offers_for_sorting(), "fastest")]
    assert ids == ["fast-mid", "early-dear", "slow-cheap"]


def test_sort_departure():
    ids = [o["id"] for o in sort_offers(_offers_for_sorting(), "departure")]
    assert ids == ["early-dear", "slow-cheap", "fast-mid"]


def test_unknown_sort_keeps_input_order():
    offers = _offers_for_sorting()
    assert sort_offers(offers, "alphabetical") == offers
    assert sort_offers(offers, None) == offers


def test_unparseable_times_sort_last():
    offers = _offers_for_sorting() + [normalize_offer({"id": "broken"})]

    assert sort_offers(offers, "fastest")[-1]["id"] == "broken"
    assert sort_offers(offers, "departure")[-1]["id"] == "broken"
