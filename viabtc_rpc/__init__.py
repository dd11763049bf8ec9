"""
viabtc_rpc - HTTP JSON-RPC client for the ViaBTC trading engine.
"""

__version__ = "0.1.0"
__logo__ = "⇄"

from viabtc_rpc.rpc import CallOutcome, Method, RpcClient

__all__ = ["CallOutcome", "Method", "RpcClient", "__version__"]
