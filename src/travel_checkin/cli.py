"""Command line front-end for traveler check-in."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from travel_checkin.adapters.config import AppConfig
from travel_checkin.adapters.geolocation import StaticGeolocationProvider
from travel_checkin.adapters.nominatim import NominatimGeocodingService
from travel_checkin.adapters.overpass import OverpassPoliceFeatureRepository
from travel_checkin.adapters.storage import JsonFileProfileStore
from travel_checkin.adapters.timers import AsyncioTickTimer
from travel_checkin.application.services.station_resolver import StationResolver
from travel_checkin.application.session import TravelSession
from travel_checkin.domain.errors import InvalidInputError, TravelCheckinError
from travel_checkin.domain.models.coordinate import Coordinate
from travel_checkin.domain.models.location import Location
from travel_checkin.domain.models.police_station import PoliceStation
from travel_checkin.domain.ports.profile_store import ProfileStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_session(
    config: AppConfig,
    http_session: aiohttp.ClientSession,
    profile_store: ProfileStore | None = None,
) -> TravelSession:
    """Wire adapters and services into a session."""
    geocoder = NominatimGeocodingService(
        http_session,
        base_url=config.nominatim_base_url,
        user_agent=config.user_agent,
        timeout_seconds=config.geocode_timeout_seconds,
        min_delay_seconds=config.nominatim_min_delay_seconds,
    )
    features = OverpassPoliceFeatureRepository(
        http_session,
        url=config.overpass_url,
        user_agent=config.user_agent,
        server_timeout_seconds=config.overpass_server_timeout_seconds,
        client_timeout_seconds=config.overpass_client_timeout_seconds,
    )
    resolver = StationResolver(
        geocoder,
        features,
        country_code=config.geocode_country_code,
        default_radius_meters=config.search_radius_meters,
        max_stations=config.max_stations,
        lookup_timeout_seconds=config.overpass_client_timeout_seconds,
    )
    return TravelSession(
        resolver,
        profile_store or JsonFileProfileStore(config.profile_store_path),
        AsyncioTickTimer(config.countdown_tick_seconds),
    )


def station_to_dict(station: PoliceStation) -> dict[str, Any]:
    """Plain representation of a station for JSON output."""
    return {
        "id": station.id,
        "name": station.name,
        "lat": station.coordinate.lat,
        "lng": station.coordinate.lng,
        "address": station.address,
        "contact": station.contact,
        "distance_km": round(station.distance, 3) if station.distance is not None else None,
        "city": station.city,
        "state": station.state,
    }


def format_station_line(index: int, station: PoliceStation) -> str:
    """One-line summary, e.g. ``1. Kotwali Police Station - 1.2 km``."""
    distance = f" - {station.distance:.1f} km" if station.distance is not None else ""
    contact = f" ({station.contact})" if station.contact else ""
    return f"{index}. {station.name}{distance}{contact}\n     {station.address}\n     ID: {station.id}"


def format_location(location: Location) -> str:
    place = location.address or ", ".join(p for p in (location.city, location.state) if p)
    coords = f"{location.coordinate.lat:.5f}, {location.coordinate.lng:.5f}"
    return f"{place} ({coords})" if place else coords


def _coordinate_from_args(args: argparse.Namespace) -> Coordinate | None:
    lat, lng = getattr(args, "lat", None), getattr(args, "lng", None)
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise InvalidInputError("--lat and --lng must be given together")
    return Coordinate(lat=lat, lng=lng)


async def _search(session: TravelSession, args: argparse.Namespace) -> list[PoliceStation]:
    coordinate = _coordinate_from_args(args)
    if args.place:
        result = await session.search.search_by_place(args.place, args.radius)
    elif coordinate is not None:
        location = await session.resolver.locate_user(StaticGeolocationProvider(coordinate))
        result = await session.search.search_by_coordinate(location.coordinate, args.radius)
    else:
        raise InvalidInputError("Give either --place or --lat/--lng")

    if result is None:
        return []
    print(f"Searching around {format_location(result.location)}\n")
    return session.search.state.selectable_candidates


async def _run_nearby(session: TravelSession, args: argparse.Namespace) -> None:
    stations = await _search(session, args)
    if args.json:
        print(json.dumps([station_to_dict(s) for s in stations], indent=2, ensure_ascii=False))
        return
    print(f"Found {len(stations)} police station(s):\n")
    for index, station in enumerate(stations, 1):
        print(format_station_line(index, station))
        print()


async def _run_link(session: TravelSession, args: argparse.Namespace) -> None:
    await _search(session, args)
    station = session.search.state.find_candidate(args.station_id)
    if station is None:
        raise InvalidInputError(f"Station {args.station_id} is not among the search results")
    if session.link.link_station(station):
        print(f"You are now linked to {station.name}.")
    else:
        print(f"Already linked to {station.name}.")


def _print_status(session: TravelSession, args: argparse.Namespace) -> None:
    registration = session.registration.load_registration()
    if registration is None:
        print("Registration: not registered")
    else:
        print(f"Registration: {registration.full_name} ({registration.city})")

    station = session.link.linked_station
    if station is None:
        print("Linked station: none")
        return
    print(f"Linked station: {station.name}, {station.address}")
    distance = session.link.current_distance(_coordinate_from_args(args))
    if distance is not None:
        print(f"Distance: {distance:.2f} km")


async def _run_ticket(session: TravelSession, args: argparse.Namespace, tick: float) -> None:
    ticket = session.open_ticket(args.destination, args.return_time, args.date, args.transport)
    print(f"Ticket open: {ticket.destination}, return by {ticket.return_datetime:%Y-%m-%d %H:%M}")
    print("Press Ctrl+C to close the ticket.\n")
    try:
        while True:
            status = session.tickets.status()
            if status is None:
                break
            print(f"\r{status.label}   ", end="", flush=True)
            await asyncio.sleep(tick)
    finally:
        session.tickets.close_ticket()
        print("\nTicket closed.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Travel check-in with nearby police stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Register once
  travel-checkin register --name "A. Traveler" --phone 9876543210 \\
      --email a@example.com --emergency-contact 9123456780 --city Ranchi --accept-terms

  # Find police stations near a place or a coordinate
  travel-checkin nearby --place Ranchi
  travel-checkin nearby --lat 23.3441 --lng 85.3096 --json

  # Link a station from the search results
  travel-checkin link node_123456 --place Ranchi

  # Open a ticket and watch the countdown
  travel-checkin ticket --destination "Patratu Valley" --return-time 18:30
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    register_parser = subparsers.add_parser("register", help="Register the traveler")
    register_parser.add_argument("--name", required=True, help="Full name")
    register_parser.add_argument("--phone", required=True, help="Phone number")
    register_parser.add_argument("--email", required=True, help="Email address")
    register_parser.add_argument("--emergency-contact", required=True, help="Emergency contact")
    register_parser.add_argument("--city", required=True, help="Home city")
    register_parser.add_argument(
        "--accept-terms", action="store_true", help="Accept the terms & privacy policy"
    )
    register_parser.add_argument(
        "--no-opt-in", action="store_true", help="Do not receive check-in notifications"
    )

    geocode_parser = subparsers.add_parser("geocode", help="Resolve a place name")
    geocode_parser.add_argument("place", help="City or area name")
    geocode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    def add_search_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--place", help="City or area to search around")
        sub.add_argument("--lat", type=float, help="Latitude to search around")
        sub.add_argument("--lng", type=float, help="Longitude to search around")
        sub.add_argument("--radius", type=int, help="Search radius in meters")

    nearby_parser = subparsers.add_parser("nearby", help="List nearby police stations")
    add_search_arguments(nearby_parser)
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    link_parser = subparsers.add_parser("link", help="Link a police station")
    link_parser.add_argument("station_id", help="Station ID from the search results")
    add_search_arguments(link_parser)

    subparsers.add_parser("unlink", help="Remove the linked police station")

    status_parser = subparsers.add_parser("status", help="Show registration and link")
    status_parser.add_argument("--lat", type=float, help="Current latitude")
    status_parser.add_argument("--lng", type=float, help="Current longitude")

    ticket_parser = subparsers.add_parser("ticket", help="Open a travel ticket")
    ticket_parser.add_argument("--destination", required=True, help="Where you are going")
    ticket_parser.add_argument("--return-time", required=True, help="Return time (HH:MM)")
    ticket_parser.add_argument("--date", help="Travel date (YYYY-MM-DD, default today)")
    ticket_parser.add_argument("--transport", help="Mode of transport")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        async with aiohttp.ClientSession() as http_session:
            with build_session(config, http_session) as session:
                if args.command == "register":
                    registration = session.registration.register(
                        full_name=args.name,
                        phone_number=args.phone,
                        email=args.email,
                        emergency_contact=args.emergency_contact,
                        city=args.city,
                        terms_accepted=args.accept_terms,
                        opt_in=not args.no_opt_in,
                    )
                    print(f"Registration completed for {registration.full_name}.")

                elif args.command == "geocode":
                    location = await session.resolver.geocode_city(args.place)
                    if args.json:
                        print(
                            json.dumps(
                                {
                                    "lat": location.coordinate.lat,
                                    "lng": location.coordinate.lng,
                                    "address": location.address,
                                    "city": location.city,
                                    "state": location.state,
                                    "country": location.country,
                                },
                                indent=2,
                                ensure_ascii=False,
                            )
                        )
                    else:
                        print(format_location(location))

                elif args.command == "nearby":
                    await _run_nearby(session, args)

                elif args.command == "link":
                    await _run_link(session, args)

                elif args.command == "unlink":
                    session.link.unlink_station()
                    print("Linked station removed.")

                elif args.command == "status":
                    _print_status(session, args)

                elif args.command == "ticket":
                    await _run_ticket(session, args, config.countdown_tick_seconds)

    except TravelCheckinError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
