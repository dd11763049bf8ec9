"""Tests for config schema and loader."""

import json
from pathlib import Path

import pytest

from viabtc_rpc.config.loader import (
    camel_to_snake,
    convert_keys,
    load_config,
    save_config,
    snake_to_camel,
)
from viabtc_rpc.config.schema import Config, EngineConfig


def test_defaults_point_at_local_engine() -> None:
    cfg = EngineConfig()
    assert cfg.host == "127.0.0.1"
    assert cfg.port == 8080
    assert cfg.timeout is None
    assert cfg.base_url == "http://127.0.0.1:8080"


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.engine.base_url == "http://127.0.0.1:8080"


def test_load_config_reads_engine_section(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"engine": {"host": "engine.local", "port": 18080, "timeout": 2.5}}))
    cfg = load_config(path)
    assert cfg.engine.host == "engine.local"
    assert cfg.engine.port == 18080
    assert cfg.engine.timeout == 2.5


def test_invalid_file_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError) as err:
        load_config(path)
    assert "Failed to load config" in str(err.value)


def test_out_of_range_port_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"engine": {"port": 70000}}))
    with pytest.raises(ValueError):
        load_config(path)


def test_save_then_load_keeps_engine(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config(Config(engine=EngineConfig(host="h", port=9000)), path)
    assert load_config(path).engine == EngineConfig(host="h", port=9000)


def test_env_vars_override_defaults(monkeypatch) -> None:
    monkeypatch.setenv("VIABTC_ENGINE__PORT", "18081")
    monkeypatch.setenv("VIABTC_ENGINE__HOST", "10.1.1.1")
    cfg = Config()
    assert cfg.engine.port == 18081
    assert cfg.engine.host == "10.1.1.1"


def test_file_values_win_over_env_and_env_fills_the_rest(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("VIABTC_ENGINE__PORT", "18081")
    monkeypatch.setenv("VIABTC_ENGINE__HOST", "from-env")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"engine": {"host": "from-file"}}))
    cfg = load_config(path)
    assert cfg.engine.host == "from-file"
    assert cfg.engine.port == 18081


def test_key_case_conversion() -> None:
    assert camel_to_snake("requestTimeout") == "request_timeout"
    assert snake_to_camel("request_timeout") == "requestTimeout"
    assert convert_keys({"engineConfig": [{"maxRetries": 1}]}) == {"engine_config": [{"max_retries": 1}]}
