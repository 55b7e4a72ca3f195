"""Parsers turning ODPT JSON-LD payloads into domain models."""

import logging
from typing import Any

from metro_stay.domain.models.fare import FareQuote
from metro_stay.domain.models.station import Station
from metro_stay.domain.models.timetable_segment import TimetableSegment

logger = logging.getLogger(__name__)


def _station_name(raw: dict[str, Any]) -> str:
    title = raw.get("odpt:stationTitle")
    if isinstance(title, dict) and title.get("ja"):
        return str(title["ja"])
    return str(raw.get("dc:title", ""))


def _build_station(raw: dict[str, Any], line_id: str) -> Station | None:
    station_id = raw.get("owl:sameAs")
    if not station_id:
        return None
    return Station(
        id=str(station_id),
        name=_station_name(raw) or str(station_id),
        latitude=float(raw.get("geo:lat") or 0.0),
        longitude=float(raw.get("geo:long") or 0.0),
        line_id=line_id,
    )


def parse_ordered_stations(
    line_id: str, railway: dict[str, Any] | None, stations_raw: list[dict[str, Any]]
) -> list[Station]:
    """Build the stations of a line in physical order.

    The railway's station order decides the sequence; stations missing from
    the order are dropped. Without a station order the payload order is kept.

    Args:
        line_id: Owning line id.
        railway: The odpt:Railway resource of the line, if available.
        stations_raw: The odpt:Station resources of the line.

    Returns:
        Ordered stations.
    """
    by_id = {str(raw.get("owl:sameAs")): raw for raw in stations_raw if raw.get("owl:sameAs")}
    station_order = (railway or {}).get("odpt:stationOrder") or []

    if station_order:
        ordered_raw = [
            by_id[item["odpt:station"]]
            for item in sorted(station_order, key=lambda item: item.get("odpt:index", 0))
            if isinstance(item, dict) and item.get("odpt:station") in by_id
        ]
    else:
        ordered_raw = list(stations_raw)

    stations = []
    for raw in ordered_raw:
        station = _build_station(raw, line_id)
        if station is not None:
            stations.append(station)
    return stations


def _stop_station(stop: dict[str, Any]) -> str | None:
    return stop.get("odpt:departureStation") or stop.get("odpt:arrivalStation")


def parse_train_segments(
    timetables: list[dict[str, Any]], max_trains: int
) -> list[TimetableSegment]:
    """Extract consecutive-stop segments from train timetables.

    Args:
        timetables: odpt:TrainTimetable resources.
        max_trains: Number of usable train runs to analyse.

    Returns:
        Segments in timetable order.
    """
    segments: list[TimetableSegment] = []
    analysed = 0

    for train in timetables:
        if analysed >= max_trains:
            break
        stops = train.get("odpt:trainTimetableObject") or []
        if len(stops) < 2:
            continue
        analysed += 1

        for current, following in zip(stops, stops[1:], strict=False):
            from_station = _stop_station(current)
            to_station = _stop_station(following)
            departure = current.get("odpt:departureTime")
            arrival = following.get("odpt:arrivalTime") or following.get("odpt:departureTime")
            if not (from_station and to_station and departure and arrival):
                continue
            segments.append(
                TimetableSegment(
                    from_station_id=from_station,
                    to_station_id=to_station,
                    departure_time=departure,
                    arrival_time=arrival,
                )
            )

    return segments


def parse_fare_quotes(rows: list[dict[str, Any]]) -> list[FareQuote]:
    """Parse odpt:RailwayFare rows; the ticket fare defaults to the IC fare."""
    quotes = []
    for row in rows:
        to_station = row.get("odpt:toStation")
        ic_fare = row.get("odpt:icCardFare")
        if not to_station or ic_fare is None:
            continue
        ticket_fare = row.get("odpt:ticketFare")
        quotes.append(
            FareQuote(
                to_station_id=str(to_station),
                ic_fare=int(ic_fare),
                ticket_fare=int(ticket_fare) if ticket_fare is not None else int(ic_fare),
            )
        )
    return quotes


def parse_station_departures(data: list[dict[str, Any]]) -> list[tuple[str, str]]:
    """Parse an odpt:StationTimetable into (departure time, destination) pairs."""
    if not data:
        return []
    departures = []
    for item in data[0].get("odpt:stationTimetableObject") or []:
        departure_time = item.get("odpt:departureTime")
        if not departure_time:
            continue
        destinations = item.get("odpt:destinationStation") or []
        destination = destinations[0] if isinstance(destinations, list) and destinations else ""
        departures.append((departure_time, str(destination)))
    return departures
