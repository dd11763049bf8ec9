"""Request/response envelopes exchanged with the trading engine."""

from __future__ import annotations

import json
import threading
import time
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from viabtc_rpc.utils.exceptions import SerializationError

INT32_MAX = 2**31 - 1


class RequestIdGenerator:
    """Correlation ids: seeded from the wall clock, then counted up, kept within int32."""

    def __init__(self, seed: int | None = None):
        self._lock = threading.Lock()
        self._next = (int(time.time()) if seed is None else seed) % INT32_MAX

    def __call__(self) -> int:
        with self._lock:
            value = self._next
            self._next = (self._next + 1) % INT32_MAX
        return value


class RpcRequest(BaseModel):
    """Outgoing call envelope."""
    method: str = Field(min_length=1)
    params: list[Any] = Field(default_factory=list)
    id: int = Field(ge=-(2**31), le=INT32_MAX)


class RpcErrorBody(BaseModel):
    """Application error reported by the engine."""
    code: int | None = None
    message: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_message(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"message": data}
        return data

    @field_validator("message", mode="before")
    @classmethod
    def _stringify_message(cls, value: Any) -> str:
        return "" if value is None else str(value)


class RpcResponse(BaseModel):
    """Incoming reply envelope; ``result`` holds the decoded payload."""
    error: RpcErrorBody | None = None
    result: Any = None


def build_request(method: str, args: list[Any], request_id: int) -> RpcRequest:
    try:
        return RpcRequest(method=method, params=args, id=request_id)
    except ValidationError as e:
        raise SerializationError(f"invalid request envelope: {e}", method=method or None) from e


def encode_request(request: RpcRequest) -> bytes:
    """Encode as compact UTF-8 JSON; NaN and Infinity are rejected."""
    payload = {"method": request.method, "params": request.params, "id": request.id}
    try:
        text = json.dumps(payload, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode request for {request.method}: {e}", method=request.method) from e
    return text.encode("utf-8")
