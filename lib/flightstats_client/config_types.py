from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import ConfigurationError

DEFAULT_BASE_URI = "https://api.flightstats.com/flex/"

# raw option name -> (field name, default, expected type)
_OPTIONAL = {
    "base_uri": ("base_uri", DEFAULT_BASE_URI, str),
    "protocol": ("protocol", "rest", str),
    "format": ("format", "json", str),
    "use_http_errors": ("use_http_errors", True, bool),
    "use_utc_time": ("use_utc_time", True, bool),
}
_REQUIRED = {
    "appId": "app_id",
    "appKey": "app_key",
}


@dataclass(frozen=True)
class ClientConfig:
    app_id: str
    app_key: str
    base_uri: str = DEFAULT_BASE_URI
    protocol: str = "rest"
    format: str = "json"
    use_http_errors: bool = True
    use_utc_time: bool = True

    def __post_init__(self) -> None:
        for key, value in (("appId", self.app_id), ("appKey", self.app_key)):
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"The required option {key} must be a non-empty string.")


def resolve_config(raw: Mapping[str, Any] | None = None) -> ClientConfig:
    """Validate raw client options and fill in the defaults.

    Accepted keys are ``base_uri``, ``protocol``, ``format``,
    ``use_http_errors``, ``use_utc_time`` and the required ``appId`` and
    ``appKey``. Anything else is rejected.
    """
    options = dict(raw or {})

    unknown = sorted(k for k in options if k not in _OPTIONAL and k not in _REQUIRED)
    if unknown:
        allowed = ", ".join(sorted([*_OPTIONAL, *_REQUIRED]))
        raise ConfigurationError(
            f"The option(s) {', '.join(unknown)} do not exist. Defined options are: {allowed}."
        )

    missing = [k for k in _REQUIRED if options.get(k) in (None, "")]
    if missing:
        raise ConfigurationError(f"The required option(s) {', '.join(missing)} are missing.")

    values: dict[str, Any] = {}
    for key, field_name in _REQUIRED.items():
        value = options[key]
        if not isinstance(value, str):
            raise ConfigurationError(f'The option "{key}" is expected to be of type "str".')
        values[field_name] = value

    for key, (field_name, default, expected) in _OPTIONAL.items():
        value = options.get(key, default)
        if not isinstance(value, expected):
            raise ConfigurationError(
                f'The option "{key}" is expected to be of type "{expected.__name__}".'
            )
        values[field_name] = value

    return ClientConfig(**values)
