# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for civil twilight.

Usage:
    # Explicit location, current time, local timezone
    twilight --lat 31.228611 --lon 121.474722

    # Given instant and timezone
    twilight --lat 31.228611 --lon 121.474722 \
        --time 2019-08-25T11:30:08+08:00 --tz Asia/Shanghai

    # Location from an HTTP geolocation service
    twilight --geolocate
"""
import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import NoReturn
from zoneinfo import ZoneInfoNotFoundError

from twilight.adapters.geolocation import DEFAULT_GEOLOCATE_URL, GeolocationAdapter
from twilight.adapters.timestamps import calculate
from twilight.adapters.zoneinfo_converter import ZoneInfoConverter, local_converter
from twilight.domain.location import Location


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def resolve_location(
    latitude: float | None,
    longitude: float | None,
    geolocate: bool = False,
    geolocate_url: str = DEFAULT_GEOLOCATE_URL,
    timeout: int = 10,
) -> Location:
    """
    Location from explicit coordinates or a geolocation lookup.

    Raises:
        ValueError: Neither a complete coordinate pair nor geolocate given.
        ConnectionError: Geolocation service unreachable.
    """
    if latitude is not None and longitude is not None:
        return Location(latitude=latitude, longitude=longitude)
    if geolocate:
        return GeolocationAdapter(url=geolocate_url, timeout=timeout).locate()
    raise ValueError("Specify both --lat and --lon, or --geolocate")


def parse_time(text: str | None, converter: ZoneInfoConverter) -> datetime:
    """ISO 8601 instant; naive values are wall time in the converter's zone. None means now."""
    if text is None:
        return converter.localize(datetime.now(tz=timezone.utc))
    return converter.localize(datetime.fromisoformat(text))


def run(
    location: Location,
    when: datetime,
    converter: ZoneInfoConverter,
) -> list[str]:
    """Report lines for one location and instant."""
    result = calculate(when, location.latitude, location.longitude)

    lines = [
        f"    location: {location}",
        f"    time now: {converter.localize(when)}",
        f"   day/night: {result.state}",
    ]
    times = result.twilight_times
    if times is not None:
        lines.append(f"     sunrise: {times.sunrise_time(converter)}")
        lines.append(f"      sunset: {times.sunset_time(converter)}")
    else:
        lines.append("polar day/night!")
    return lines


def main():
    parser = argparse.ArgumentParser(
        description="Civil twilight (day/night, sunrise, sunset) for a time and place"
    )
    parser.add_argument('--lat', type=float, help="Latitude in degrees (north positive)")
    parser.add_argument('--lon', type=float, help="Longitude in degrees (east positive)")
    parser.add_argument(
        '--time',
        help="ISO 8601 date-time (default: now; naive values use --tz)"
    )
    parser.add_argument(
        '--tz',
        help="IANA timezone for input and output (default: system local)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    geo_group = parser.add_argument_group('geolocation')
    geo_group.add_argument(
        '--geolocate', action='store_true', default=False,
        help="Look up location over HTTP when --lat/--lon are not given"
    )
    geo_group.add_argument(
        '--geolocate-url', default=DEFAULT_GEOLOCATE_URL,
        help=f"Geolocate API endpoint (default: {DEFAULT_GEOLOCATE_URL})"
    )
    geo_group.add_argument(
        '--timeout', type=int, default=10,
        help="HTTP timeout in seconds (default: 10)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        converter = ZoneInfoConverter(args.tz) if args.tz else local_converter()
    except (ZoneInfoNotFoundError, ValueError) as e:
        _fail(f"Unknown timezone {args.tz!r}: {e}")

    try:
        when = parse_time(args.time, converter)
    except ValueError as e:
        _fail(f"Invalid --time {args.time!r}: {e}")

    try:
        location = resolve_location(
            args.lat, args.lon,
            geolocate=args.geolocate,
            geolocate_url=args.geolocate_url,
            timeout=args.timeout,
        )
    except (ValueError, ConnectionError) as e:
        _fail(str(e))

    for line in run(location, when, converter):
        print(line)


if __name__ == '__main__':
    main()
