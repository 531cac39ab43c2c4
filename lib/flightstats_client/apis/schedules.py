from __future__ import annotations

from datetime import date
from typing import Any, Mapping
from zoneinfo import ZoneInfoNotFoundError

from .base import Api, date_path, date_to_utc


class Schedules(Api):
    API_NAME = "schedules"
    API_VERSION = "v1"

    def get_departing_flights(
            self,
            carrier: str,
            flight: str | int,
            day: date | str,
            query: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        return self._flights(carrier, flight, "departing", day, query)

    def get_arriving_flights(
            self,
            carrier: str,
            flight: str | int,
            day: date | str,
            query: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        return self._flights(carrier, flight, "arriving", day, query)

    def _flights(self, carrier, flight, direction: str, day, query) -> list[dict]:
        endpoint = f"flight/{carrier}/{flight}/{direction}/{date_path(day)}"
        response = self.send_request(endpoint, query)
        flights = response.get("scheduledFlights") if isinstance(response, dict) else None
        flights = self.expand_flights(response, flights)
        if self.client.get_config("use_utc_time"):
            for item in flights:
                self._add_utc_times(item)
        return flights

    @staticmethod
    def _add_utc_times(item: dict) -> None:
        for prefix, airport_key in (("departure", "departureAirport"), ("arrival", "arrivalAirport")):
            local = item.get(f"{prefix}Time")
            airport = item.get(airport_key) or {}
            tz_name = airport.get("timeZoneRegionName")
            if isinstance(local, str) and local and isinstance(tz_name, str) and tz_name:
                try:
                    item[f"{prefix}TimeUtc"] = date_to_utc(local, tz_name)
                except (ValueError, ZoneInfoNotFoundError):
                    # unknown zone or unparsable time: leave the UTC field out
                    continue
