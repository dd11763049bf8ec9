"""Remote calls to the trading engine."""

from viabtc_rpc.rpc.arguments import extract_arguments
from viabtc_rpc.rpc.client import CallOutcome, RpcClient
from viabtc_rpc.rpc.decoder import decode_response
from viabtc_rpc.rpc.envelope import (
    RequestIdGenerator,
    RpcErrorBody,
    RpcRequest,
    RpcResponse,
    build_request,
    encode_request,
)
from viabtc_rpc.rpc.methods import Method, is_known_method
from viabtc_rpc.rpc.transport import HttpTransport, Transport, TransportOutcome

__all__ = [
    "CallOutcome",
    "HttpTransport",
    "Method",
    "RequestIdGenerator",
    "RpcClient",
    "RpcErrorBody",
    "RpcRequest",
    "RpcResponse",
    "Transport",
    "TransportOutcome",
    "build_request",
    "decode_response",
    "encode_request",
    "extract_arguments",
    "is_known_method",
]
