from .client import FlexClient, parse_error, parse_response
from .config_types import ClientConfig, resolve_config
from .errors import ApiClientError, ConfigurationError, DecodeError, FlexClientError, InvalidApiError

__all__ = [
    "FlexClient",
    "ClientConfig",
    "resolve_config",
    "parse_response",
    "parse_error",
    "FlexClientError",
    "ConfigurationError",
    "InvalidApiError",
    "ApiClientError",
    "DecodeError",
]
