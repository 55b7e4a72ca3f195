"""Composition root wiring adapters into the stay search service."""

import logging
import sys

from aiohttp import ClientSession

from metro_stay.adapters.config import AppConfig, LineConfigurationLoader
from metro_stay.adapters.odpt_api import (
    OdptFareProvider,
    OdptHttpClient,
    OdptTimetableProvider,
    OdptTopologyProvider,
    OdptTrainScheduleProvider,
)
from metro_stay.adapters.osrm_api import OsrmWalkingTimeProvider
from metro_stay.adapters.rakuten_api import RakutenLodgingProvider
from metro_stay.application.services import (
    CandidateAggregator,
    FareResolver,
    GraphBuilder,
    RouteSearch,
    StaySearchService,
    TransitNetworkLoader,
)
from metro_stay.domain.models import TransitNetwork

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_search_service(config: AppConfig, session: ClientSession | None) -> StaySearchService:
    """Wire the ODPT, Rakuten and OSRM adapters into a search service.

    Missing credentials are reported once here; the affected adapters return
    empty data instead of failing.
    """
    lines = LineConfigurationLoader.load(config)
    logger.info(f"Loaded {len(lines)} line(s)")

    if not config.odpt_api_key:
        logger.warning("ODPT_API_KEY is not set, network topology and fares are unavailable")
    if not config.rakuten_app_id:
        logger.warning("RAKUTEN_APP_ID is not set, lodging search is unavailable")

    odpt_client = OdptHttpClient(
        session,
        config.odpt_api_key,
        min_delay_seconds=config.odpt_min_delay_seconds,
        timeout_seconds=config.api_timeout_seconds,
    )
    network = TransitNetwork()
    network_loader = TransitNetworkLoader(
        OdptTopologyProvider(odpt_client, lines),
        OdptTimetableProvider(odpt_client, max_trains=config.max_sampled_trains),
        GraphBuilder(default_edge_minutes=config.default_edge_minutes),
    )
    route_search = RouteSearch(
        network,
        transfer_penalty_minutes=config.transfer_penalty_minutes,
        max_transfers=config.max_transfers,
    )
    aggregator = CandidateAggregator(
        network,
        FareResolver(OdptFareProvider(odpt_client), fallback_fare=config.fallback_fare),
        RakutenLodgingProvider(
            session,
            config.rakuten_app_id,
            search_radius_km=config.lodging_search_radius_km,
            timeout_seconds=config.api_timeout_seconds,
        ),
        walking_time_provider=OsrmWalkingTimeProvider(
            session, timeout_seconds=config.api_timeout_seconds
        ),
        train_schedule_provider=OdptTrainScheduleProvider(odpt_client),
        group_delay_seconds=config.lodging_min_delay_seconds,
        walking_batch_size=config.walking_batch_size,
    )
    return StaySearchService(
        network,
        network_loader,
        route_search,
        aggregator,
        max_candidates_per_station=config.max_candidates_per_station,
        default_mode=config.default_ranking_mode,
    )
