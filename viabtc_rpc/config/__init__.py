"""Configuration module for viabtc_rpc."""

from viabtc_rpc.config.loader import load_config, get_config_path, save_config
from viabtc_rpc.config.schema import Config, EngineConfig

__all__ = ["Config", "EngineConfig", "load_config", "get_config_path", "save_config"]
