"""Command-line interface for viabtc_rpc."""
