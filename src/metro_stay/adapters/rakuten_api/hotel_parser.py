"""Parser for Rakuten VacantHotelSearch responses."""

import logging
from typing import Any

from metro_stay.domain.models.candidate import Candidate

logger = logging.getLogger(__name__)


def _find_section(hotel_container: list[Any], key: str) -> Any:
    for entry in hotel_container:
        if isinstance(entry, dict) and key in entry:
            return entry[key]
    return None


def _cheapest_room(room_infos: Any, nights: int) -> dict[str, Any] | None:
    """Cheapest priced plan: the stay total, or the daily total times nights."""
    if not isinstance(room_infos, list):
        return None

    cheapest: dict[str, Any] | None = None
    for room in room_infos:
        if not isinstance(room, dict):
            continue
        charge = room.get("dailyCharge") or {}
        price = charge.get("stayTotal") or (charge.get("total") or 0) * nights
        if not price or price <= 0:
            continue
        basic = room.get("roomBasicInfo") or {}
        if cheapest is None or price < cheapest["price"]:
            cheapest = {
                "price": int(price),
                "room_image_url": basic.get("roomImageUrl") or room.get("roomImageUrl"),
                "room_thumbnail_url": basic.get("roomThumbnailUrl")
                or room.get("roomThumbnailUrl"),
            }
    return cheapest


def _parse_hotel(item: Any, nights: int) -> Candidate | None:
    hotel_container = item.get("hotel") if isinstance(item, dict) else None
    if not isinstance(hotel_container, list):
        return None

    basic_info = _find_section(hotel_container, "hotelBasicInfo")
    if not isinstance(basic_info, dict):
        return None

    room = _cheapest_room(_find_section(hotel_container, "roomInfo"), nights)
    if room is None:
        return None

    rating = basic_info.get("reviewAverage")
    return Candidate(
        id=str(basic_info.get("hotelNo", "")),
        name=basic_info.get("hotelName") or "Unknown Hotel",
        price=room["price"],
        rating=float(rating) if rating is not None else None,
        latitude=basic_info.get("latitude"),
        longitude=basic_info.get("longitude"),
        url=basic_info.get("hotelInformationUrl"),
        image_url=basic_info.get("hotelImageUrl"),
        room_image_url=room["room_image_url"],
        room_thumbnail_url=room["room_thumbnail_url"],
    )


def parse_vacant_hotels(data: Any, nights: int) -> list[Candidate]:
    """Parse a VacantHotelSearch payload into candidates sorted by price.

    Hotels without any positively priced plan are dropped.

    Args:
        data: Decoded JSON response.
        nights: Number of nights, used when only a daily charge is quoted.
    """
    if not isinstance(data, dict):
        return []
    hotel_list = data.get("hotels") or data.get("items")
    if not isinstance(hotel_list, list):
        return []

    candidates = []
    for item in hotel_list:
        try:
            candidate = _parse_hotel(item, nights)
        except (TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed hotel entry: {e}")
            continue
        if candidate is not None:
            candidates.append(candidate)
    return sorted(candidates, key=lambda candidate: candidate.price)
