from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_uri, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/flightstats/config.toml).")


def _mask(value: str) -> str:
    if not value:
        return "(empty)"
    if len(value) <= 4:
        return "****"
    return "*" * (len(value) - 4) + value[-4:]


def _switch(value: str, option: str) -> bool:
    text = value.strip().lower()
    if text in {"on", "true", "yes", "1"}:
        return True
    if text in {"off", "false", "no", "0"}:
        return False
    raise typer.BadParameter(f"{option} expects on or off, got '{value}'.")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        app_id: str = typer.Option(..., "--app-id", prompt="FlightStats appId", help="FlightStats application id."),
        app_key: str = typer.Option(
            ...,
            "--app-key",
            prompt="FlightStats appKey",
            hide_input=True,
            help="FlightStats application key.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.app_id = app_id.strip()
    cfg.app_key = app_key.strip()
    if not cfg.app_id or not cfg.app_key:
        console.err("appId and appKey cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"app_id={cfg.app_id or '(empty)'} app_key={_mask(cfg.app_key)} base_uri={cfg.base_uri} "
        f"protocol={cfg.protocol} format={cfg.format} "
        f"use_http_errors={cfg.use_http_errors} use_utc_time={cfg.use_utc_time}"
    )


@app.command("set")
def set_setting(
        app_id: str | None = typer.Option(None, "--app-id", help="Set FlightStats application id."),
        app_key: str | None = typer.Option(None, "--app-key", help="Set FlightStats application key."),
        base_uri: str | None = typer.Option(None, "--base-uri", help="Set API base URI."),
        use_http_errors: str | None = typer.Option(
            None, "--http-errors", help="on/off: ask the API for HTTP status codes on errors."
        ),
        use_utc_time: str | None = typer.Option(None, "--utc-time", help="on/off: add UTC times to schedule results."),
):
    cfg = load_config(env=False)
    if app_id is not None:
        cfg.app_id = app_id.strip()
    if app_key is not None:
        cfg.app_key = app_key.strip()
    if base_uri is not None:
        cfg.base_uri = normalize_base_uri(base_uri)
    if use_http_errors is not None:
        cfg.use_http_errors = _switch(use_http_errors, "--http-errors")
    if use_utc_time is not None:
        cfg.use_utc_time = _switch(use_utc_time, "--utc-time")
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
