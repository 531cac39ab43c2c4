from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any, Mapping
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from ..client import FlexClient


def date_path(value: date | str) -> str:
    """Format a date as the ``{year}/{month}/{day}`` path segment."""
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        value = date.fromisoformat(value.strip())
    return f"{value.year}/{value.month}/{value.day}"


def parse_appendix(response: Any, section: str) -> dict[str, dict]:
    appendix = response.get("appendix") if isinstance(response, dict) else None
    items = appendix.get(section) if isinstance(appendix, dict) else None
    out: dict[str, dict] = {}
    if not isinstance(items, list):
        return out
    for item in items:
        if isinstance(item, dict) and item.get("fs"):
            out[str(item["fs"])] = item
    return out


def date_to_utc(local: str, time_zone: str) -> str:
    """Convert a local airport timestamp to the API's UTC notation."""
    dt = datetime.fromisoformat(local)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo(time_zone))
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class Api:
    API_NAME = ""
    API_VERSION = ""

    def __init__(self, client: FlexClient):
        self.client = client

    def send_request(self, endpoint: str, query: Mapping[str, Any] | None = None) -> Any:
        return self.client.send_request(self.API_NAME, self.API_VERSION, endpoint, query)

    def expand_flights(self, response: Any, flights: Any) -> list[dict]:
        """Attach airline and airport records from the appendix to each flight."""
        if not isinstance(flights, list):
            return []
        airlines = parse_appendix(response, "airlines")
        airports = parse_appendix(response, "airports")
        out: list[dict] = []
        for flight in flights:
            if not isinstance(flight, dict):
                continue
            item = dict(flight)
            item["airline"] = airlines.get(str(flight.get("carrierFsCode") or ""))
            item["departureAirport"] = airports.get(str(flight.get("departureAirportFsCode") or ""))
            item["arrivalAirport"] = airports.get(str(flight.get("arrivalAirportFsCode") or ""))
            out.append(item)
        return out
