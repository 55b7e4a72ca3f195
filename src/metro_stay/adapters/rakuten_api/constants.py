"""Constants for the Rakuten Travel API adapter.

API documentation: https://webservice.rakuten.co.jp/documentation/vacant-hotel-search
Requires an application id. Requests are limited to roughly one per second.
"""

RAKUTEN_VACANT_HOTEL_URL = (
    "https://app.rakuten.co.jp/services/api/Travel/VacantHotelSearch/20170426"
)
RAKUTEN_MIN_DELAY_SECONDS = 1.0
DEFAULT_SEARCH_RADIUS_KM = 1.0
# datumType=1: WGS84 degrees
DATUM_TYPE_WGS84 = 1
