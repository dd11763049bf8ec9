"""HTTP transport: one synchronous POST per call over a pooled httpx client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import httpx

from viabtc_rpc.utils.exceptions import NetworkError

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class TransportOutcome:
    """Raw reply: status code and the fully read body."""
    status_code: int
    content: bytes


@runtime_checkable
class Transport(Protocol):
    """Sends one encoded request and returns the raw reply."""

    def send(self, body: bytes) -> TransportOutcome:
        ...


class HttpTransport:
    """POSTs JSON bodies to a fixed engine URL.

    The httpx client is created once and reused, so connections are pooled for
    the lifetime of the transport. httpx.Client is safe to share between threads.
    """

    def __init__(self, url: str, *, timeout: float | None = None, client: httpx.Client | None = None):
        self.url = url
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=timeout) if timeout is not None else httpx.Client()
        self._client = client

    def send(self, body: bytes) -> TransportOutcome:
        try:
            # Leaving the block closes the response and returns the connection to the pool.
            with self._client.stream("POST", self.url, content=body, headers=JSON_HEADERS) as resp:
                content = resp.read()
                return TransportOutcome(status_code=resp.status_code, content=content)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"engine timeout: POST {self.url}", url=self.url) from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"engine network error: POST {self.url}: {exc}", url=self.url) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
