from __future__ import annotations

import threading

import httpx

from .config_types import ClientConfig


class Transport:
    """Holds the HTTP client used for every request of one FlexClient.

    The client is either injected or created on first use and reused
    afterwards. Creation is guarded so concurrent first calls build a
    single client.
    """

    def __init__(self, cfg: ClientConfig, client: httpx.Client | None = None):
        self._cfg = cfg
        self._client = client
        self._owns_client = client is None
        self._lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = httpx.Client(
                        base_url=self._cfg.base_uri,
                        headers={"User-Agent": "flightstats-client/0.1.0"},
                        follow_redirects=True,
                    )
        return self._client

    def close(self) -> None:
        with self._lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None

    def get(self, path: str, params: dict) -> httpx.Response:
        client = self.client
        url = path
        # injected clients may come without a base_url
        if not client.base_url.host:
            url = self._cfg.base_uri.rstrip("/") + "/" + path
        return client.get(url, params=params)
