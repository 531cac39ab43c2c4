from __future__ import annotations

import json
import logging
from typing import Any, Mapping, NoReturn

import httpx

from .apis import Api, FlightStatus, Schedules, resolve_api
from .config_types import ClientConfig, resolve_config
from .errors import ApiClientError, DecodeError
from .transport import Transport

log = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Something went wrong"
HTTP_ERRORS_FLAG = "useHTTPErrors"

# error bodies carry the text after a fixed-width "message" prefix
_MESSAGE_OFFSET = 9


def parse_response(body: bytes | str) -> Any:
    """Decode a success body. Invalid JSON raises DecodeError."""
    try:
        return json.loads(body)
    except ValueError as e:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        raise DecodeError(f"Response is not valid JSON: {e}", text[:1000]) from e


def parse_error(body: str, *, status_code: int | None = None) -> NoReturn:
    """Extract the message of an error body and raise it as ApiClientError.

    The body is scanned line by line, not parsed: the first line mentioning
    ``message`` is cut at a fixed offset.
    """
    message = FALLBACK_ERROR_MESSAGE
    for line in body.split("\n"):
        if "message" in line:
            message = line[_MESSAGE_OFFSET:]
            break
    raise ApiClientError(message, 0, status_code)


def _masked(query: Mapping[str, Any]) -> dict[str, Any]:
    return {k: ("***" if k == "appKey" else v) for k, v in query.items()}


class FlexClient:
    def __init__(
            self,
            options: Mapping[str, Any] | ClientConfig | None = None,
            *,
            http_client: httpx.Client | None = None,
    ):
        if isinstance(options, ClientConfig):
            self._cfg = options
        else:
            self._cfg = resolve_config(options)
        self._t = Transport(self._cfg, http_client)

    def __enter__(self) -> FlexClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def get_config(self, name: str) -> Any:
        return getattr(self._cfg, name)

    def get_client(self) -> httpx.Client:
        return self._t.client

    def close(self) -> None:
        self._t.close()

    # --- API resources ---
    def api(self, name: str) -> Api:
        return resolve_api(name, self)

    @property
    def flight_status(self) -> FlightStatus:
        return self.api("flightStatus")

    @property
    def schedules(self) -> Schedules:
        return self.api("schedules")

    # --- requests ---
    def build_endpoint(self, api: str, version: str, endpoint: str) -> str:
        return "/".join([api, self._cfg.protocol, version, self._cfg.format, endpoint])

    def build_query(self, query_params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge the credentials and extended options into the query.

        Credentials go in first, so caller supplied ``appId``/``appKey``
        replace the configured ones.
        """
        query: dict[str, Any] = {
            "appId": self._cfg.app_id,
            "appKey": self._cfg.app_key,
        }
        query.update(query_params or {})

        extended = query.get("extendedOptions")
        if extended is None:
            options: list[str] = []
        elif isinstance(extended, (list, tuple)):
            options = list(extended)
        else:
            options = [extended]

        if self._cfg.use_http_errors and HTTP_ERRORS_FLAG not in options:
            options.append(HTTP_ERRORS_FLAG)

        query["extendedOptions"] = "+".join(str(o) for o in options)
        return query

    def send_request(
            self,
            api: str,
            version: str,
            endpoint: str,
            query_params: Mapping[str, Any] | None = None,
    ) -> Any:
        path = self.build_endpoint(api, version, endpoint)
        query = self.build_query(query_params)
        log.debug("GET %s query=%s", path, _masked(query))

        r = self._t.get(path, query)

        if 400 <= r.status_code < 500:
            log.warning("GET %s failed with %s", path, r.status_code)
            parse_error(r.text, status_code=r.status_code)

        # 3xx and 5xx are left to the transport layer
        if not r.is_success:
            r.raise_for_status()
        return parse_response(r.content)
