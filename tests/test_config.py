"""Tests for relay configuration loading and saving."""

import json

from nanorelay.config import RelayConfig, load_config, save_config
from nanorelay.config.loader import camel_to_snake, snake_to_camel
from nanorelay.relay import Channel


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.json")
        assert config == RelayConfig()

    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "orders", "maxListeners": 3, "trace": True}))

        config = load_config(path)

        assert config.name == "orders"
        assert config.max_listeners == 3
        assert config.trace is True

    def test_invalid_json_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert load_config(path) == RelayConfig()

    def test_negative_threshold_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"maxListeners": -1}))
        assert load_config(path) == RelayConfig()

    def test_save_writes_camel_case(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        save_config(RelayConfig(name="ticks", max_listeners=10), path)

        raw = json.loads(path.read_text())
        assert raw == {"name": "ticks", "trace": False, "maxListeners": 10}
        assert load_config(path).max_listeners == 10


class TestKeyConversion:
    def test_camel_to_snake(self):
        assert camel_to_snake("maxListeners") == "max_listeners"

    def test_snake_to_camel(self):
        assert snake_to_camel("max_listeners") == "maxListeners"


class TestTraceLogging:
    def test_trace_logs_each_dispatch(self):
        from loguru import logger

        relay = Channel(RelayConfig(name="traced", trace=True))
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            relay.dispatch(1)
        finally:
            logger.remove(sink_id)

        assert any("traced" in m and "dispatch" in m for m in messages)
