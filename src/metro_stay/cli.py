"""Command line interface for metro stay search."""

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from datetime import date, timedelta
from typing import Any

import aiohttp
from pydantic import ValidationError

from metro_stay.adapters.config import AppConfig
from metro_stay.adapters.logging_result_sink import LoggingResultSink
from metro_stay.adapters.search_run_registry import SearchRunRegistry
from metro_stay.domain.models import RankingMode, ScoredResult, SearchRequest
from metro_stay.main import configure_logging, create_search_service


def result_to_dict(result: ScoredResult) -> dict[str, Any]:
    """Serialize a ranked result for JSON output."""
    data = asdict(result)
    data["lines"] = list(result.lines)
    data["travel_time"] = result.travel_time
    return data


def format_result(rank: int, result: ScoredResult) -> str:
    """One human readable block for a ranked result."""
    candidate = result.candidate
    marker = " [baseline]" if result.is_baseline else ""
    rating = f"{candidate.rating:.2f}" if candidate.rating is not None else "-"
    lines = [
        f"{rank:>3}. {candidate.name}{marker}",
        f"     Station: {result.station_name}  train {result.train_time} min"
        f" + walk {result.walk_time} min, {result.transfers} transfer(s)",
        f"     Price: ¥{candidate.price:,}  fare ¥{result.ic_fare} (IC)"
        f"  total ¥{result.total_cost:,}  rating {rating}",
    ]
    if result.savings is not None and not result.is_baseline:
        lines.append(
            f"     Saved: ¥{result.saved_money:,}  extra {result.extra_time} min"
            f"  index {result.cospa_index}"
        )
    schedule = result.train_schedule
    if schedule is not None and schedule.last_train is not None:
        lines.append(
            f"     Last train: {schedule.last_train.departure_time}"
            f" -> {schedule.last_train.arrival_time}"
        )
    if schedule is not None and schedule.first_train is not None:
        lines.append(
            f"     First train: {schedule.first_train.departure_time}"
            f" -> {schedule.first_train.arrival_time}"
        )
    return "\n".join(lines)


async def list_stations(config: AppConfig, format_json: bool = False) -> None:
    """Print every station group of the configured lines."""
    async with aiohttp.ClientSession() as session:
        service = create_search_service(config, session)
        network = await service.initialize()

    groups = [
        {"name": group.name, "station_ids": list(group.station_ids)} for group in network.groups
    ]
    if format_json:
        print(json.dumps(groups, indent=2, ensure_ascii=False))
        return
    if not groups:
        print("No stations loaded. Is ODPT_API_KEY set?", file=sys.stderr)
        sys.exit(1)
    print(f"\n{len(groups)} station(s):\n")
    for group in groups:
        print(f"  {group['name']} ({len(group['station_ids'])} line(s))")


async def search_stays(
    config: AppConfig, request: SearchRequest, mode: RankingMode, format_json: bool = False
) -> None:
    """Run a full search and print the final ranking."""
    sink = LoggingResultSink()
    async with aiohttp.ClientSession() as session:
        service = create_search_service(config, session)
        await service.initialize()
        if service.network.group(request.destination_name) is None:
            print(f"Unknown station: {request.destination_name}", file=sys.stderr)
            sys.exit(1)
        search_session = await service.search(
            request, sink, run_token=SearchRunRegistry().start_run(), mode=mode
        )

    results = search_session.results
    if format_json:
        print(json.dumps([result_to_dict(r) for r in results], indent=2, ensure_ascii=False))
        return
    if not results:
        print(f"No lodging found around {request.destination_name}", file=sys.stderr)
        sys.exit(1)
    print(f"\n{len(results)} result(s) around {request.destination_name} ({mode}):\n")
    for rank, result in enumerate(results, start=1):
        print(format_result(rank, result))


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the stations and search commands."""
    parser = argparse.ArgumentParser(
        description="Find lodging near rail stations reachable from a destination"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    stations_parser = subparsers.add_parser("stations", help="List station groups")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search and rank lodging")
    search_parser.add_argument("destination", help="Destination station name (e.g., 新宿)")
    search_parser.add_argument(
        "--check-in",
        type=date.fromisoformat,
        default=None,
        help="Check-in date (YYYY-MM-DD, default: today)",
    )
    search_parser.add_argument(
        "--check-out",
        type=date.fromisoformat,
        default=None,
        help="Check-out date (YYYY-MM-DD, default: day after check-in)",
    )
    search_parser.add_argument("--guests", type=int, default=2, help="Number of guests")
    search_parser.add_argument("--rooms", type=int, default=1, help="Number of rooms")
    search_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RankingMode],
        default=None,
        help="Ranking mode (default from configuration)",
    )
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")
    return parser


async def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config.log_level)

    try:
        if args.command == "stations":
            await list_stations(config, format_json=args.json)

        elif args.command == "search":
            check_in = args.check_in or date.today()
            check_out = args.check_out or check_in + timedelta(days=1)
            try:
                request = SearchRequest(
                    destination_name=args.destination,
                    check_in=check_in,
                    check_out=check_out,
                    guest_count=args.guests,
                    room_count=args.rooms,
                )
            except ValidationError as e:
                print(f"Invalid search: {e}", file=sys.stderr)
                sys.exit(1)
            mode = RankingMode(args.mode) if args.mode else config.default_ranking_mode
            await search_stays(config, request, mode, format_json=args.json)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
