"""Utility functions for viabtc_rpc."""

from viabtc_rpc.utils.exceptions import (
    RpcCallError,
    ExtractionError,
    SerializationError,
    NetworkError,
    DecodeError,
    ApplicationError,
    StatusError,
    ErrorCategory,
    classify_exception,
    sanitize_error_message,
)

__all__ = [
    "RpcCallError",
    "ExtractionError",
    "SerializationError",
    "NetworkError",
    "DecodeError",
    "ApplicationError",
    "StatusError",
    "ErrorCategory",
    "classify_exception",
    "sanitize_error_message",
]
