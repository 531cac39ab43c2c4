from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import InvalidApiError
from .base import Api
from .flight_status import FlightStatus
from .schedules import Schedules

if TYPE_CHECKING:
    from ..client import FlexClient

API_REGISTRY: dict[str, type[Api]] = {
    "FlightStatus": FlightStatus,
    "Schedules": Schedules,
}


def available_apis() -> list[str]:
    return sorted(API_REGISTRY)


def resolve_api(name: str, client: FlexClient) -> Api:
    api_name = name[:1].upper() + name[1:]
    api_cls = API_REGISTRY.get(api_name)
    if api_cls is None:
        raise InvalidApiError(f"API {api_name} doesn't exist.")
    return api_cls(client)


__all__ = ["API_REGISTRY", "Api", "FlightStatus", "Schedules", "available_apis", "resolve_api"]
