"""Response decoding into the generic envelope plus a caller-chosen result type."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from viabtc_rpc.rpc.envelope import RpcErrorBody, RpcResponse
from viabtc_rpc.utils.exceptions import DecodeError


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_response(content: bytes, result_type: Any = Any, *, status_code: int | None = None) -> RpcResponse:
    """
    Parse an engine reply.

    The result is only validated against ``result_type`` when the envelope
    carries no error. Any malformed body or shape mismatch raises DecodeError.
    """
    try:
        body = json.loads(content)
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(f"response is not valid JSON: {exc}", status_code=status_code) from exc
    except RecursionError as exc:
        raise DecodeError("response nests too deeply to decode", status_code=status_code) from exc
    if not isinstance(body, dict):
        raise DecodeError(
            f"response envelope must be an object, got {type(body).__name__}",
            status_code=status_code,
        )

    raw_error = body.get("error")
    if raw_error is not None:
        try:
            error = RpcErrorBody.model_validate(raw_error)
        except ValidationError as exc:
            raise DecodeError(f"malformed error field: {exc}", status_code=status_code) from exc
        return RpcResponse(error=error, result=None)

    try:
        result = _adapter(result_type).validate_python(body.get("result"))
    except ValidationError as exc:
        raise DecodeError(f"result does not match expected shape: {exc}", status_code=status_code) from exc
    return RpcResponse(error=None, result=result)
