"""ODPT fare table provider adapter."""

from metro_stay.adapters.odpt_api.constants import RAILWAY_FARE, TOKYO_METRO_OPERATOR_ID
from metro_stay.adapters.odpt_api.http_client import OdptHttpClient
from metro_stay.adapters.odpt_api.parsers import parse_fare_quotes
from metro_stay.domain.models.fare import FareQuote
from metro_stay.domain.ports.fare_provider import FareProvider


class OdptFareProvider(FareProvider):
    """Fetches operator fare tables from ODPT."""

    def __init__(
        self, http_client: OdptHttpClient, operator_id: str = TOKYO_METRO_OPERATOR_ID
    ) -> None:
        """Initialize with an ODPT client and the operator whose fares apply."""
        self._http_client = http_client
        self._operator_id = operator_id

    async def fares_from(self, station_id: str) -> list[FareQuote]:
        """Fetch fares from a station to every other station of the operator."""
        rows = await self._http_client.get_resources(
            RAILWAY_FARE, {"odpt:operator": self._operator_id, "odpt:fromStation": station_id}
        )
        return parse_fare_quotes(rows)
