from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from flightstats_client.config_types import DEFAULT_BASE_URI

APP_NAME = "flightstats"
CONFIG_FILENAME = "config.toml"
ENV_APP_ID = "FLIGHTSTATS_APP_ID"
ENV_APP_KEY = "FLIGHTSTATS_APP_KEY"
ENV_BASE_URI = "FLIGHTSTATS_BASE_URI"


@dataclass
class AppConfig:
    app_id: str = ""
    app_key: str = ""
    base_uri: str = DEFAULT_BASE_URI
    protocol: str = "rest"
    format: str = "json"
    use_http_errors: bool = True
    use_utc_time: bool = True


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_uri(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    lowered = value.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        value = f"https://{value}"
    # relative endpoints are resolved below the base path
    return value.rstrip("/") + "/"


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "app_id": cfg.app_id,
        "app_key": cfg.app_key,
        "base_uri": cfg.base_uri,
        "protocol": cfg.protocol,
        "format": cfg.format,
        "use_http_errors": cfg.use_http_errors,
        "use_utc_time": cfg.use_utc_time,
    }


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.app_id = str(data.get("app_id") or "").strip()
    cfg.app_key = str(data.get("app_key") or "").strip()
    cfg.base_uri = normalize_base_uri(str(data.get("base_uri") or "")) or DEFAULT_BASE_URI
    cfg.protocol = str(data.get("protocol") or "").strip() or cfg.protocol
    cfg.format = str(data.get("format") or "").strip() or cfg.format
    cfg.use_http_errors = _as_bool(data.get("use_http_errors"), cfg.use_http_errors)
    cfg.use_utc_time = _as_bool(data.get("use_utc_time"), cfg.use_utc_time)
    return cfg


def load_config(*, env: bool = True) -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg) if env else cfg


def apply_env(cfg: AppConfig) -> AppConfig:
    app_id = os.getenv(ENV_APP_ID, "").strip()
    app_key = os.getenv(ENV_APP_KEY, "").strip()
    base_uri = os.getenv(ENV_BASE_URI, "").strip()
    if app_id:
        cfg.app_id = app_id
    if app_key:
        cfg.app_key = app_key
    if base_uri:
        cfg.base_uri = normalize_base_uri(base_uri)
    return cfg


def to_client_options(cfg: AppConfig) -> dict[str, Any]:
    """Raw option mapping accepted by flightstats_client.resolve_config."""
    options: dict[str, Any] = {
        "base_uri": cfg.base_uri,
        "protocol": cfg.protocol,
        "format": cfg.format,
        "use_http_errors": cfg.use_http_errors,
        "use_utc_time": cfg.use_utc_time,
    }
    # left out when empty so the resolver reports them as missing
    if cfg.app_id:
        options["appId"] = cfg.app_id
    if cfg.app_key:
        options["appKey"] = cfg.app_key
    return options


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
