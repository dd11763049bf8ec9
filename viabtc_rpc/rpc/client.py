"""RPC client for the trading engine.

Every engine method (balance.query, order.put_limit, market.kline, ...) goes
through RpcClient.call: extract arguments, build and encode the envelope, POST
it, decode the reply, then classify the outcome.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from loguru import logger

from viabtc_rpc.config.schema import EngineConfig
from viabtc_rpc.rpc.arguments import extract_arguments
from viabtc_rpc.rpc.decoder import decode_response
from viabtc_rpc.rpc.envelope import RequestIdGenerator, build_request, encode_request
from viabtc_rpc.rpc.transport import HttpTransport, Transport
from viabtc_rpc.utils.exceptions import ApplicationError, RpcCallError, StatusError

T = TypeVar("T")

HTTP_OK = 200


@dataclass(frozen=True)
class CallOutcome(Generic[T]):
    """Result of try_call: exactly one of ``result`` / ``error`` is meaningful."""
    result: T | None = None
    error: RpcCallError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.result  # type: ignore[return-value]


class RpcClient:
    """Synchronous client for a single engine endpoint; safe to share between threads."""

    def __init__(
        self,
        url: str,
        *,
        transport: Transport | None = None,
        timeout: float | None = None,
        id_generator: RequestIdGenerator | None = None,
    ):
        self.url = url
        self._transport = transport or HttpTransport(url, timeout=timeout)
        self._next_id = id_generator or RequestIdGenerator()

    @classmethod
    def from_config(cls, cfg: EngineConfig, **kwargs: Any) -> RpcClient:
        return cls(f"{cfg.base_url}/", timeout=cfg.timeout, **kwargs)

    def call(self, method: str, params: Any = None, result_type: Any = Any) -> Any:
        """
        Invoke ``method`` on the engine and return its decoded result.

        Raises ExtractionError, SerializationError, NetworkError, DecodeError,
        ApplicationError or StatusError; an embedded application error wins
        over the HTTP status.
        """
        if isinstance(method, Enum):
            method = method.value
        try:
            args = extract_arguments(params)
            request = build_request(method, args, self._next_id())
            body = encode_request(request)
        except RpcCallError as e:
            logger.warning(f"RPC {method} failed before sending: {e.code} - {e.message}")
            raise

        started = time.monotonic()
        try:
            outcome = self._transport.send(body)
        except RpcCallError as e:
            logger.warning(f"RPC {method} id={request.id} failed: {e.code} - {e.message}")
            raise
        elapsed_ms = (time.monotonic() - started) * 1000
        logger.debug(f"RPC {method} id={request.id} status={outcome.status_code} in {elapsed_ms:.1f}ms")

        try:
            response = decode_response(outcome.content, result_type, status_code=outcome.status_code)
        except RpcCallError as e:
            logger.warning(f"RPC {method} id={request.id} failed: {e.code} - {e.message}")
            raise

        if response.error is not None:
            logger.warning(
                f"RPC {method} id={request.id} returned error {response.error.code}: {response.error.message}"
            )
            raise ApplicationError(
                response.error.message,
                rpc_code=response.error.code,
                status_code=outcome.status_code,
            )
        if outcome.status_code != HTTP_OK:
            logger.warning(f"RPC {method} id={request.id} unexpected status {outcome.status_code}")
            raise StatusError(outcome.status_code)
        return response.result

    def try_call(self, method: str, params: Any = None, result_type: Any = Any) -> CallOutcome[Any]:
        """Same as call, but returns the failure instead of raising it."""
        try:
            return CallOutcome(result=self.call(method, params, result_type))
        except RpcCallError as e:
            return CallOutcome(error=e)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> RpcClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
