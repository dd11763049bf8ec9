"""
Exception hierarchy for viabtc_rpc calls.

Provides:
- One exception class per stage of a remote call (extract, encode, send, decode)
- Application errors reported by the engine, kept apart from transport failures
- Error categorization (retryable, validation, fatal)
- Safe error message formatting (no sensitive data leak)
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    RETRYABLE = "retryable"
    FATAL = "fatal"
    VALIDATION = "validation"
    APPLICATION = "application"
    PROTOCOL = "protocol"


class RpcCallError(Exception):
    """Base exception for every failure of a remote call."""

    def __init__(
        self,
        message: str,
        code: str = "RPC_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ExtractionError(RpcCallError):
    """Parameter value cannot be turned into positional wire arguments."""

    def __init__(self, message: str, value_type: str | None = None):
        details = {"value_type": value_type} if value_type else {}
        super().__init__(message, code="EXTRACTION_ERROR", category=ErrorCategory.VALIDATION, details=details)


class SerializationError(RpcCallError):
    """Request envelope cannot be encoded."""

    def __init__(self, message: str, method: str | None = None):
        details = {"method": method} if method else {}
        super().__init__(message, code="SERIALIZATION_ERROR", category=ErrorCategory.VALIDATION, details=details)


class NetworkError(RpcCallError):
    """Connection, write or read failure at the transport layer."""

    def __init__(self, message: str, url: str | None = None):
        details = {"url": url} if url else {}
        super().__init__(message, code="NETWORK_ERROR", category=ErrorCategory.RETRYABLE, details=details)


class DecodeError(RpcCallError):
    """Response body is malformed or the result has the wrong shape."""

    def __init__(self, message: str, status_code: int | None = None):
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, code="DECODE_ERROR", category=ErrorCategory.PROTOCOL, details=details)


class ApplicationError(RpcCallError):
    """Error embedded by the engine in the response envelope."""

    def __init__(self, message: str, rpc_code: int | None = None, status_code: int | None = None):
        super().__init__(
            message,
            code="APPLICATION_ERROR",
            category=ErrorCategory.APPLICATION,
            details={"rpc_code": rpc_code, "status_code": status_code},
        )
        self.rpc_code = rpc_code
        self.status_code = status_code

    def __str__(self) -> str:
        if self.rpc_code is None:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}] {self.message} (rpc code {self.rpc_code})"


class StatusError(RpcCallError):
    """Non-success HTTP status without an embedded application error."""

    def __init__(self, status_code: int):
        super().__init__(
            f"unexpected status code: {status_code}",
            code="STATUS_ERROR",
            category=ErrorCategory.RETRYABLE if status_code >= 500 else ErrorCategory.FATAL,
            details={"status_code": status_code},
        )
        self.status_code = status_code


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory, bool]:
    """
    Classify an exception and return (error_code, category, should_retry).

    Returns:
        Tuple of (error_code, category, should_retry)
    """
    if isinstance(exc, RpcCallError):
        return exc.code, exc.category, exc.category == ErrorCategory.RETRYABLE

    if isinstance(exc, ConnectionError):
        return "CONNECTION_ERROR", ErrorCategory.RETRYABLE, True

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.PROTOCOL, False

    if isinstance(exc, (ValueError, TypeError)):
        return "INVALID_VALUE", ErrorCategory.VALIDATION, False

    return "INTERNAL_ERROR", ErrorCategory.FATAL, False
