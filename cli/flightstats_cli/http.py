from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Iterator

import httpx
import typer

from flightstats_client import ConfigurationError, FlexClient, FlexClientError

from . import console
from .config import AppConfig, normalize_base_uri, to_client_options


def make_client(cfg: AppConfig, *, base_uri_override: str | None = None) -> FlexClient:
    options = to_client_options(cfg)
    if base_uri_override:
        options["base_uri"] = normalize_base_uri(base_uri_override)
    return FlexClient(options)


def parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise typer.BadParameter(f"Invalid date '{value}', expected YYYY-MM-DD.")


@contextmanager
def api_errors() -> Iterator[None]:
    """Report client failures on the console and exit non-zero."""
    try:
        yield
    except ConfigurationError as e:
        console.err(str(e))
        console.info("Run `flightstats settings init` to store your credentials.")
        raise typer.Exit(code=2)
    except FlexClientError as e:
        console.err(str(e))
        raise typer.Exit(code=1)
    except httpx.HTTPError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=1)
