"""Constants for the ODPT open-data API adapter.

API documentation: https://developer.odpt.org/documents
A consumer key is required for every request.
"""

from metro_stay.domain.models.line import Line

ODPT_BASE_URL = "https://api.odpt.org/api/v4"
TOKYO_METRO_OPERATOR_ID = "odpt.Operator:TokyoMetro"

# Resource types
RAILWAY = "odpt:Railway"
STATION = "odpt:Station"
TRAIN_TIMETABLE = "odpt:TrainTimetable"
STATION_TIMETABLE = "odpt:StationTimetable"
RAILWAY_FARE = "odpt:RailwayFare"

# Calendars
CALENDAR_WEEKDAY = "odpt.Calendar:Weekday"
CALENDAR_SATURDAY_HOLIDAY = "odpt.Calendar:SaturdayHoliday"

# Train runs analysed per line when sampling segment durations
MAX_SAMPLED_TRAINS = 20

# Tokyo Metro lines used when no line table is configured
TOKYO_METRO_LINES: tuple[Line, ...] = (
    Line(
        id="odpt.Railway:TokyoMetro.Marunouchi",
        name="丸ノ内線",
        color="#F62E36",
        reference_station_id="odpt.Station:TokyoMetro.Marunouchi.Shinjuku",
        direction_ascending="odpt.RailDirection:TokyoMetro.Ikebukuro",
        direction_descending="odpt.RailDirection:TokyoMetro.Ogikubo",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Ginza",
        name="銀座線",
        color="#FF9500",
        reference_station_id="odpt.Station:TokyoMetro.Ginza.Shibuya",
        direction_ascending="odpt.RailDirection:TokyoMetro.Asakusa",
        direction_descending="odpt.RailDirection:TokyoMetro.Shibuya",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Hibiya",
        name="日比谷線",
        color="#B5B5AC",
        reference_station_id="odpt.Station:TokyoMetro.Hibiya.Ueno",
        direction_ascending="odpt.RailDirection:TokyoMetro.KitaSenju",
        direction_descending="odpt.RailDirection:TokyoMetro.NakaMeguro",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Tozai",
        name="東西線",
        color="#009BBF",
        reference_station_id="odpt.Station:TokyoMetro.Tozai.Nakano",
        direction_ascending="odpt.RailDirection:TokyoMetro.NishiFunabashi",
        direction_descending="odpt.RailDirection:TokyoMetro.Nakano",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Chiyoda",
        name="千代田線",
        color="#00BB85",
        reference_station_id="odpt.Station:TokyoMetro.Chiyoda.Omotesando",
        direction_ascending="odpt.RailDirection:TokyoMetro.KitaAyase",
        direction_descending="odpt.RailDirection:TokyoMetro.YoyogiUehara",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Yurakucho",
        name="有楽町線",
        color="#C1A470",
        reference_station_id="odpt.Station:TokyoMetro.Yurakucho.Ikebukuro",
        direction_ascending="odpt.RailDirection:TokyoMetro.ShinKiba",
        direction_descending="odpt.RailDirection:TokyoMetro.Wakoshi",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Hanzomon",
        name="半蔵門線",
        color="#8F76D6",
        reference_station_id="odpt.Station:TokyoMetro.Hanzomon.Shibuya",
        direction_ascending="odpt.RailDirection:TokyoMetro.Oshiage",
        direction_descending="odpt.RailDirection:TokyoMetro.Shibuya",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Namboku",
        name="南北線",
        color="#00AC9B",
        reference_station_id="odpt.Station:TokyoMetro.Namboku.Meguro",
        direction_ascending="odpt.RailDirection:TokyoMetro.AkabaneIwabuchi",
        direction_descending="odpt.RailDirection:TokyoMetro.Meguro",
    ),
    Line(
        id="odpt.Railway:TokyoMetro.Fukutoshin",
        name="副都心線",
        color="#9C5E31",
        reference_station_id="odpt.Station:TokyoMetro.Fukutoshin.Shibuya",
        direction_ascending="odpt.RailDirection:TokyoMetro.Shibuya",
        direction_descending="odpt.RailDirection:TokyoMetro.Wakoshi",
    ),
)
