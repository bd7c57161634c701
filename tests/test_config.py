"""Tests for trash_guides.config module."""

import pytest

from trash_guides.config import DEFAULT_API_URL, DEFAULT_BASE_URL, TrashConfig, find_config


class TestTrashConfigFromDict:
    """Tests for TrashConfig.from_dict()."""

    def test_default_values(self):
        """Empty dict should use sensible defaults."""
        config = TrashConfig.from_dict({})

        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_url == DEFAULT_API_URL
        assert config.cache_ttl == 3600
        assert config.concurrency_limit == 20
        assert config.rate_limit_enabled is False
        assert config.log_level == "INFO"

    def test_sections(self):
        config = TrashConfig.from_dict({
            "source": {"base_url": "https://mirror.example/json/"},
            "cache": {"ttl": 120},
            "fetch": {"concurrency_limit": 5, "timeout": 10, "user_agent": "me"},
            "logging": {"level": "DEBUG", "file": "trash.log"},
            "rate_limit": {"enabled": True, "requests_per_minute": 30, "burst": 2},
        })

        assert config.base_url == "https://mirror.example/json"
        assert config.cache_ttl == 120
        assert config.concurrency_limit == 5
        assert config.timeout == 10
        assert config.user_agent == "me"
        assert config.log_level == "DEBUG"
        assert config.log_file == "trash.log"
        assert config.rate_limit_enabled is True
        assert config.rate_limit_rpm == 30
        assert config.rate_limit_burst == 2

    def test_invalid_concurrency_limit(self):
        with pytest.raises(ValueError):
            TrashConfig.from_dict({"fetch": {"concurrency_limit": 0}})

    def test_negative_ttl(self):
        with pytest.raises(ValueError):
            TrashConfig(cache_ttl=-1)


class TestTrashConfigFiles:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("cache:\n  ttl: 60\nfetch:\n  concurrency_limit: 4\n")

        config = TrashConfig.load(str(path))
        assert config.cache_ttl == 60
        assert config.concurrency_limit == 4

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert TrashConfig.load(str(path)) == TrashConfig()

    def test_load_missing_file(self):
        with pytest.raises(FileNotFoundError):
            TrashConfig.load("/nonexistent/trash.yaml")

    def test_load_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- source\n- cache\n")
        with pytest.raises(ValueError, match="mapping"):
            TrashConfig.load(str(path))

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "saved.yaml"
        original = TrashConfig(cache_ttl=90, concurrency_limit=7, rate_limit_enabled=True)
        original.save(str(path))

        assert TrashConfig.load(str(path)) == original


class TestFindConfig:
    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("{}")
        monkeypatch.setenv("TRASH_GUIDES_CONFIG", str(path))
        assert find_config() == str(path)

    def test_project_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TRASH_GUIDES_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".trash-guides.yaml").write_text("{}")
        assert find_config() == str(tmp_path / ".trash-guides.yaml")

    def test_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TRASH_GUIDES_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert find_config() is None
