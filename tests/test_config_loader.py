"""Tests for the extractor config loader."""

from pathlib import Path
from unittest.mock import patch

import pytest

from chaptertrack.config.loader import (
    ConfigSource,
    ExtractorConfig,
    _find_project_config,
    _get_root_dir,
    _get_user_config_path,
    _load_yaml_config,
    _resolve_config,
    clear_config_cache,
    get_config,
)

ENV_VARS = (
    "CHAPTERTRACK_METADATA_TIMEOUT",
    "CHAPTERTRACK_PARSE_DESCRIPTION",
    "CHAPTERTRACK_YT_DLP_PATH",
)


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Point root at an empty dir, clear env overrides and the config cache."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CHAPTERTRACK_ROOT", str(tmp_path / "root"))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    clear_config_cache()
    yield
    clear_config_cache()


def _write_project_config(base: Path, body: str) -> Path:
    config_dir = base / ".chaptertrack"
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "config.yaml"
    config_file.write_text(body)
    return config_file


def _write_user_config(tmp_path: Path, body: str) -> Path:
    root = tmp_path / "root"
    root.mkdir(parents=True, exist_ok=True)
    config_file = root / "config.yaml"
    config_file.write_text(body)
    return config_file


class TestExtractorConfig:
    """Tests for ExtractorConfig dataclass."""

    def test_defaults(self):
        config = ExtractorConfig()
        assert config.metadata_timeout == 30
        assert config.parse_description is True
        assert config.yt_dlp_path is None
        assert config.source == ConfigSource.DEFAULT

    def test_repr(self):
        repr_str = repr(ExtractorConfig(source=ConfigSource.USER))
        assert "metadata_timeout=" in repr_str
        assert "source='user'" in repr_str

    def test_is_frozen(self):
        config = ExtractorConfig()
        with pytest.raises(AttributeError):
            config.metadata_timeout = 1  # type: ignore


class TestLoadYamlConfig:
    """Tests for _load_yaml_config."""

    def test_load_nonexistent_file(self, tmp_path):
        assert _load_yaml_config(tmp_path / "nonexistent.yaml") is None

    def test_load_valid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("extractor:\n  metadata_timeout: 10\n")
        assert _load_yaml_config(config_file) == {"extractor": {"metadata_timeout": 10}}

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert _load_yaml_config(config_file) == {}

    def test_load_invalid_yaml_type(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- item1\n- item2\n")
        assert _load_yaml_config(config_file) is None

    def test_load_broken_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("extractor: [unclosed\n")
        assert _load_yaml_config(config_file) is None


class TestPaths:
    """Tests for root and config path discovery."""

    def test_root_from_env(self, tmp_path):
        assert _get_root_dir() == (tmp_path / "root").resolve()

    def test_user_config_path(self, tmp_path):
        assert _get_user_config_path() == (tmp_path / "root").resolve() / "config.yaml"

    def test_finds_project_config_in_parent(self, tmp_path, monkeypatch):
        config_file = _write_project_config(tmp_path / "work", "extractor: {}\n")
        subdir = tmp_path / "work" / "src" / "module"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)

        assert _find_project_config() == config_file

    def test_no_project_config(self):
        with patch("chaptertrack.config.loader.Path.cwd", return_value=Path("/")):
            assert _find_project_config() is None


class TestResolveConfig:
    """Tests for _resolve_config priority handling."""

    def test_defaults_when_nothing_set(self):
        config = _resolve_config()
        assert config == ExtractorConfig()
        assert config.source == ConfigSource.DEFAULT

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("CHAPTERTRACK_METADATA_TIMEOUT", "45")
        monkeypatch.setenv("CHAPTERTRACK_PARSE_DESCRIPTION", "no")
        monkeypatch.setenv("CHAPTERTRACK_YT_DLP_PATH", "/opt/bin/yt-dlp")

        config = _resolve_config()
        assert config.metadata_timeout == 45.0
        assert config.parse_description is False
        assert config.yt_dlp_path == "/opt/bin/yt-dlp"
        assert config.source == ConfigSource.ENV

    def test_project_config(self, tmp_path):
        _write_project_config(tmp_path / "work", "extractor:\n  metadata_timeout: 10\n")
        config = _resolve_config()
        assert config.metadata_timeout == 10.0
        assert config.source == ConfigSource.PROJECT

    def test_user_config(self, tmp_path):
        _write_user_config(tmp_path, "extractor:\n  parse_description: false\n")
        config = _resolve_config()
        assert config.parse_description is False
        assert config.source == ConfigSource.USER

    def test_priority_per_setting(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHAPTERTRACK_METADATA_TIMEOUT", "5")
        _write_project_config(
            tmp_path / "work",
            "extractor:\n  metadata_timeout: 10\n  parse_description: false\n",
        )
        _write_user_config(
            tmp_path,
            "extractor:\n  metadata_timeout: 20\n  yt_dlp_path: /usr/local/bin/yt-dlp\n",
        )

        config = _resolve_config()
        assert config.metadata_timeout == 5.0
        assert config.parse_description is False
        assert config.yt_dlp_path == "/usr/local/bin/yt-dlp"
        assert config.source == ConfigSource.ENV

    def test_relative_tool_path_resolved_against_config(self, tmp_path):
        config_file = _write_project_config(
            tmp_path / "work", "extractor:\n  yt_dlp_path: bin/yt-dlp\n"
        )
        config = _resolve_config()
        assert config.yt_dlp_path == str((config_file.parent / "bin" / "yt-dlp").resolve())

    def test_invalid_timeout_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("CHAPTERTRACK_METADATA_TIMEOUT", "soon")
        config = _resolve_config()
        assert config.metadata_timeout == 30
        assert "Invalid metadata_timeout" in caplog.text

    def test_non_positive_timeout_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHAPTERTRACK_METADATA_TIMEOUT", "0")
        _write_user_config(tmp_path, "extractor:\n  metadata_timeout: 12\n")
        config = _resolve_config()
        assert config.metadata_timeout == 12.0
        assert config.source == ConfigSource.USER

    def test_invalid_bool_ignored(self, monkeypatch):
        monkeypatch.setenv("CHAPTERTRACK_PARSE_DESCRIPTION", "maybe")
        assert _resolve_config().parse_description is True

    def test_extractor_section_not_mapping(self, tmp_path):
        _write_user_config(tmp_path, "extractor: 42\n")
        assert _resolve_config() == ExtractorConfig()

    def test_unknown_keys_ignored(self, tmp_path):
        _write_user_config(tmp_path, "extractor:\n  colour: blue\n")
        assert _resolve_config().source == ConfigSource.DEFAULT


class TestGetConfig:
    """Tests for the cached accessor."""

    def test_cached(self):
        assert get_config() is get_config()

    def test_clear_cache(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("CHAPTERTRACK_METADATA_TIMEOUT", "99")
        assert get_config() is first

        clear_config_cache()
        assert get_config().metadata_timeout == 99.0
