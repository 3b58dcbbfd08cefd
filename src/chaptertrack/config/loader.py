"""
Extractor configuration loader with priority resolution.

Root directory (CHAPTERTRACK_ROOT):
- macOS/Linux: ~/.chaptertrack
- Windows: %APPDATA%\\chaptertrack
- Override: CHAPTERTRACK_ROOT environment variable

Each setting resolves independently, highest priority first:
1. Environment variable (CHAPTERTRACK_METADATA_TIMEOUT,
   CHAPTERTRACK_PARSE_DESCRIPTION, CHAPTERTRACK_YT_DLP_PATH)
2. Project config (.chaptertrack/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Defaults

Config files keep extractor settings under an ``extractor:`` section::

    extractor:
      metadata_timeout: 45
      parse_description: false
      yt_dlp_path: /opt/bin/yt-dlp
"""

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from chaptertrack.config.defaults import (
    DEFAULT_METADATA_TIMEOUT,
    DEFAULT_PARSE_DESCRIPTION,
)

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class ExtractorConfig:
    """Resolved extractor configuration.

    ``source`` records the highest-priority source that set any value.
    """

    metadata_timeout: float = DEFAULT_METADATA_TIMEOUT
    parse_description: bool = DEFAULT_PARSE_DESCRIPTION
    yt_dlp_path: str | None = None
    source: ConfigSource = ConfigSource.DEFAULT

    def __repr__(self) -> str:
        return (
            f"ExtractorConfig(metadata_timeout={self.metadata_timeout!r}, "
            f"parse_description={self.parse_description!r}, "
            f"yt_dlp_path={self.yt_dlp_path!r}, source={self.source.value!r})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .chaptertrack/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".chaptertrack" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the chaptertrack root directory (may not exist yet)."""
    env_root = os.environ.get("CHAPTERTRACK_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "chaptertrack"
        return Path.home() / "AppData" / "Roaming" / "chaptertrack"
    return Path.home() / ".chaptertrack"


def _get_user_config_path() -> Path:
    return _get_root_dir() / "config.yaml"


def _extractor_section(config: dict[str, Any] | None) -> dict[str, Any]:
    if not config:
        return {}
    section = config.get("extractor")
    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning("Config section 'extractor' is not a mapping, ignoring it")
        return {}
    return section


def _coerce_timeout(value: Any, origin: str) -> float | None:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid metadata_timeout {value!r} from {origin}, ignoring")
        return None
    if timeout <= 0:
        logger.warning(f"metadata_timeout must be positive (got {value!r} from {origin})")
        return None
    return timeout


def _coerce_bool(value: Any, origin: str) -> bool | None:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    logger.warning(f"Invalid parse_description {value!r} from {origin}, ignoring")
    return None


def _coerce_path(value: Any, origin: str, config_path: Path | None = None) -> str | None:
    if not value or not isinstance(value, str):
        logger.warning(f"Invalid yt_dlp_path {value!r} from {origin}, ignoring")
        return None
    path = Path(value).expanduser()
    # Relative paths in a config file are relative to that file
    if config_path is not None and not path.is_absolute() and os.sep in value:
        path = (config_path.parent / path).resolve()
    return str(path)


def _layers() -> list[tuple[ConfigSource, dict[str, Any], Path | None]]:
    """Collect raw settings from every source, highest priority first."""
    layers: list[tuple[ConfigSource, dict[str, Any], Path | None]] = []

    env: dict[str, Any] = {}
    for key, var in (
        ("metadata_timeout", "CHAPTERTRACK_METADATA_TIMEOUT"),
        ("parse_description", "CHAPTERTRACK_PARSE_DESCRIPTION"),
        ("yt_dlp_path", "CHAPTERTRACK_YT_DLP_PATH"),
    ):
        value = os.environ.get(var)
        if value:
            env[key] = value
    layers.append((ConfigSource.ENV, env, None))

    project_path = _find_project_config()
    if project_path:
        project = _extractor_section(_load_yaml_config(project_path))
        layers.append((ConfigSource.PROJECT, project, project_path))

    user_path = _get_user_config_path()
    user = _extractor_section(_load_yaml_config(user_path))
    layers.append((ConfigSource.USER, user, user_path))

    return layers


def _resolve_config() -> ExtractorConfig:
    """Resolve configuration from all sources in priority order."""
    resolved: dict[str, Any] = {}
    source = ConfigSource.DEFAULT

    coercers = {
        "metadata_timeout": _coerce_timeout,
        "parse_description": _coerce_bool,
    }

    for layer_source, values, config_path in _layers():
        origin = str(config_path) if config_path else layer_source.value
        for key, raw in values.items():
            if key in resolved:
                continue
            if key == "yt_dlp_path":
                value = _coerce_path(raw, origin, config_path)
            elif key in coercers:
                value = coercers[key](raw, origin)
            else:
                logger.debug(f"Unknown extractor setting {key!r} in {origin}")
                continue
            if value is None:
                continue
            resolved[key] = value
            if source is ConfigSource.DEFAULT:
                source = layer_source

    config = ExtractorConfig(**resolved, source=source)
    logger.debug(f"Resolved {config!r}")
    return config


@lru_cache(maxsize=1)
def get_config() -> ExtractorConfig:
    """Get resolved extractor configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    get_config.cache_clear()
