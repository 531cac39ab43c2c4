from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import api_errors, make_client


def _parse_params(items: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Invalid query parameter '{item}', expected key=value.")
        params[key.strip()] = value
    return params


def request(
        api: str = typer.Argument(..., help="API name, e.g. flightstatus."),
        version: str = typer.Argument(..., help="API version, e.g. v2."),
        endpoint: str = typer.Argument(..., help="Endpoint path below the format segment."),
        query: list[str] = typer.Option([], "-q", "--query", help="Query parameter key=value (repeatable)."),
        extended: list[str] = typer.Option([], "-x", "--extended", help="Extended option flag (repeatable)."),
        base_uri: str | None = typer.Option(None, "--base-uri", help="Override the configured base URI."),
):
    """Send a raw GET request and print the decoded response."""
    params: dict[str, object] = dict(_parse_params(query))
    if extended:
        params["extendedOptions"] = list(extended)
    cfg = load_config()
    with api_errors(), make_client(cfg, base_uri_override=base_uri) as client:
        data = client.send_request(api, version, endpoint, params)
    console.print_json(data)
