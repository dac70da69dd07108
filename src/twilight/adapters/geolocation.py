# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geolocation adapter: approximate coordinates from an HTTP lookup service.

Speaks the Mozilla Location Service geolocate API, now served by
compatible providers such as beaconDB. An empty request body asks for an
IP-based fix.

External dependencies (urllib, json) are confined to this layer.
"""
import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from twilight.domain.location import Location
from twilight.ports import LocationSource

_log = logging.getLogger(__name__)

DEFAULT_GEOLOCATE_URL = "https://api.beacondb.net/v1/geolocate"


def parse_geolocate_response(payload: dict[str, Any]) -> Location:
    """
    Parse a geolocate API response.

    Expected shape: {"location": {"lat": ..., "lng": ...}, "accuracy": ...}

    Raises:
        ValueError: Missing or non-numeric fields.
    """
    try:
        loc = payload["location"]
        latitude = float(loc["lat"])
        longitude = float(loc["lng"])
        accuracy = payload.get("accuracy")
        accuracy_m = float(accuracy) if accuracy is not None else None
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed geolocate response: {payload!r}") from e

    return Location(latitude=latitude, longitude=longitude, accuracy_m=accuracy_m)


class GeolocationAdapter(LocationSource):
    """
    Looks up the caller's location via a geolocate HTTP endpoint.

    Args:
        url: Geolocate API URL (MLS-compatible).
        timeout: HTTP request timeout in seconds.
    """

    def __init__(self, url: str = DEFAULT_GEOLOCATE_URL, timeout: int = 10):
        self._url = url
        self._timeout = timeout

    def locate(self) -> Location:
        payload = self._post_json(self._url, {})
        location = parse_geolocate_response(payload)
        _log.debug("Geolocated %s (accuracy %s m)", location, location.accuracy_m)
        return location

    def _post_json(self, url: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and decode the JSON reply."""
        req = urllib.request.Request(
            url,
            data=json.dumps(body).encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "User-Agent": "twilight/1.0",
            },
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                text = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise ConnectionError(f"Geolocation API error {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise ConnectionError(f"Geolocation connection failed: {e.reason}") from e
        except (TimeoutError, http.client.HTTPException) as e:
            raise ConnectionError(f"Geolocation response failed: {e!r}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Geolocation response is not JSON: {e}") from e
