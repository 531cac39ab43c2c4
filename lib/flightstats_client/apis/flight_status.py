from __future__ import annotations

from datetime import date
from typing import Any, Mapping

from .base import Api, date_path


class FlightStatus(Api):
    API_NAME = "flightstatus"
    API_VERSION = "v2"

    def get_flight_status_by_id(self, flight_id: int | str, query: Mapping[str, Any] | None = None) -> dict:
        response = self.send_request(f"flight/status/{flight_id}", query)
        status = response.get("flightStatus") if isinstance(response, dict) else None
        return status if isinstance(status, dict) else {}

    def get_flight_status_by_arrival_date(
            self,
            carrier: str,
            flight: str | int,
            day: date | str,
            query: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        return self._by_date(carrier, flight, "arr", day, query)

    def get_flight_status_by_departure_date(
            self,
            carrier: str,
            flight: str | int,
            day: date | str,
            query: Mapping[str, Any] | None = None,
    ) -> list[dict]:
        return self._by_date(carrier, flight, "dep", day, query)

    def _by_date(self, carrier, flight, direction: str, day, query) -> list[dict]:
        endpoint = f"flight/status/{carrier}/{flight}/{direction}/{date_path(day)}"
        response = self.send_request(endpoint, query)
        flights = response.get("flightStatuses") if isinstance(response, dict) else None
        return self.expand_flights(response, flights)
