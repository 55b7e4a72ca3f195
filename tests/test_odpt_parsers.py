"""Tests for ODPT payload parsers."""

from metro_stay.adapters.odpt_api.parsers import (
    parse_fare_quotes,
    parse_ordered_stations,
    parse_station_departures,
    parse_train_segments,
)
from metro_stay.domain.models import FareQuote, TimetableSegment


def _raw_station(suffix: str, ja: str) -> dict:
    return {
        "owl:sameAs": f"odpt.Station:TokyoMetro.Ginza.{suffix}",
        "dc:title": suffix,
        "odpt:stationTitle": {"ja": ja, "en": suffix},
        "geo:lat": 35.67,
        "geo:long": 139.76,
    }


def test_stations_follow_railway_station_order() -> None:
    """Given a station order, when parsing, then stations are sorted by its index."""
    railway = {
        "odpt:stationOrder": [
            {"odpt:index": 2, "odpt:station": "odpt.Station:TokyoMetro.Ginza.Ginza"},
            {"odpt:index": 1, "odpt:station": "odpt.Station:TokyoMetro.Ginza.Shibuya"},
            {"odpt:index": 3, "odpt:station": "odpt.Station:TokyoMetro.Ginza.Missing"},
        ]
    }
    raw = [_raw_station("Ginza", "銀座"), _raw_station("Shibuya", "渋谷")]

    stations = parse_ordered_stations("odpt.Railway:TokyoMetro.Ginza", railway, raw)

    assert [s.name for s in stations] == ["渋谷", "銀座"]
    assert stations[0].line_id == "odpt.Railway:TokyoMetro.Ginza"
    assert stations[0].latitude == 35.67


def test_stations_without_order_keep_payload_order() -> None:
    """Given no railway resource, when parsing, then the payload order is kept."""
    raw = [
        _raw_station("Ginza", "銀座"),
        {"dc:title": "no id"},
        _raw_station("Shibuya", "渋谷"),
    ]

    stations = parse_ordered_stations("L", None, raw)

    assert [s.name for s in stations] == ["銀座", "渋谷"]


def test_station_name_falls_back_to_title() -> None:
    """Given no Japanese title, when parsing, then dc:title is used."""
    raw = {"owl:sameAs": "S1", "dc:title": "Ueno"}

    stations = parse_ordered_stations("L", None, [raw])

    assert stations[0].name == "Ueno"
    assert stations[0].latitude == 0.0


def test_train_segments_use_consecutive_stops() -> None:
    """Given train timetables, when parsing, then consecutive stops become segments."""
    timetables = [
        {
            "odpt:trainTimetableObject": [
                {"odpt:departureTime": "10:00", "odpt:departureStation": "A"},
                {"odpt:departureTime": "10:02", "odpt:departureStation": "B"},
                {"odpt:arrivalTime": "10:05", "odpt:arrivalStation": "C"},
            ]
        },
        {"odpt:trainTimetableObject": [{"odpt:departureTime": "11:00"}]},
    ]

    segments = parse_train_segments(timetables, max_trains=20)

    assert segments == [
        TimetableSegment("A", "B", "10:00", "10:02"),
        TimetableSegment("B", "C", "10:02", "10:05"),
    ]


def test_train_segments_respect_train_limit() -> None:
    """Given more trains than the limit, when parsing, then only the first ones are analysed."""
    train = {
        "odpt:trainTimetableObject": [
            {"odpt:departureTime": "10:00", "odpt:departureStation": "A"},
            {"odpt:departureTime": "10:02", "odpt:departureStation": "B"},
        ]
    }

    segments = parse_train_segments([train] * 5, max_trains=2)

    assert len(segments) == 2


def test_fare_quotes_default_ticket_fare_to_ic_fare() -> None:
    """Given fare rows, when parsing, then missing ticket fares equal the IC fare."""
    rows = [
        {"odpt:toStation": "X", "odpt:icCardFare": 178, "odpt:ticketFare": 180},
        {"odpt:toStation": "Y", "odpt:icCardFare": 209},
        {"odpt:toStation": "Z"},
    ]

    assert parse_fare_quotes(rows) == [FareQuote("X", 178, 180), FareQuote("Y", 209, 209)]


def test_station_departures_keep_timetable_order() -> None:
    """Given a station timetable, when parsing, then departures keep their order."""
    data = [
        {
            "odpt:stationTimetableObject": [
                {"odpt:departureTime": "05:10", "odpt:destinationStation": ["odpt.Station:X"]},
                {"odpt:destinationStation": ["odpt.Station:X"]},
                {"odpt:departureTime": "00:05"},
            ]
        }
    ]

    assert parse_station_departures(data) == [("05:10", "odpt.Station:X"), ("00:05", "")]
    assert parse_station_departures([]) == []
