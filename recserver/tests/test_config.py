"""ServerConfig loading from the environment and engine config files."""

import json

import pytest

from recserver.config import ServerConfig, get_config, reload_config


class TestServerConfig:

    def test_paths_default_under_data_dir(self, tmp_path):
        config = ServerConfig(data_dir=tmp_path)

        assert config.catalog_json_path == tmp_path / "catalog.json"
        assert config.learners_json_path == tmp_path / "learners.json"
        assert config.learning_paths_json_path == tmp_path / "learning_paths.json"

    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_JSON_PATH", str(tmp_path / "other.json"))

        config = ServerConfig.from_env()

        assert config.port == 9001
        assert config.log_level == "DEBUG"
        assert config.catalog_json_path == tmp_path / "other.json"
        assert config.learners_json_path == tmp_path / "learners.json"
        assert config.engine_config_path is None

    def test_validate_reports_missing_files(self, tmp_path):
        ok, errors = ServerConfig(data_dir=tmp_path, engine_config_path=tmp_path / "engine.json").validate()

        assert not ok
        assert len(errors) == 3

    def test_validate_ok(self, server_config):
        assert server_config.validate() == (True, [])

    def test_engine_config_from_file(self, tmp_path):
        engine_file = tmp_path / "engine.json"
        engine_file.write_text(json.dumps({"limits": {"recommendations": 3}, "weights": {"popular": 40}}))

        engine_config = ServerConfig(data_dir=tmp_path, engine_config_path=engine_file).load_engine_config()

        assert engine_config.default_recommendation_limit == 3
        assert engine_config.weight_popular == 40
        assert engine_config.next_steps_limit == 5

    def test_engine_config_defaults_without_file(self, tmp_path):
        assert ServerConfig(data_dir=tmp_path).load_engine_config().default_recommendation_limit == 10

    def test_reload_config_rereads_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8100")
        first = reload_config()
        monkeypatch.setenv("PORT", "8200")

        assert get_config() is first
        assert reload_config().port == 8200


@pytest.fixture(autouse=True)
def _reset_global_config():
    yield
    reload_config()
