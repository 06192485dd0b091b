"""Configuration loading from an optional YAML file and environment variables."""

import logging
import os
from dataclasses import dataclass, field, fields

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "#mdGallery"


class ConfigError(Exception):
    """Configuration file or values are unusable."""


@dataclass(frozen=True)
class Config:
    vault_dir: str = "./vault"
    marker_tags: list[str] = field(default_factory=lambda: [DEFAULT_MARKER])
    document_extension: str = ".md"
    output_format: str = "text"
    log_level: str = "INFO"


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _check_types(values: dict) -> None:
    """Raise ConfigError unless string settings are str and marker_tags is a list of str."""
    for key in ("vault_dir", "document_extension", "output_format", "log_level"):
        if key in values and not isinstance(values[key], str):
            raise ConfigError(f"{key} must be a string, got {type(values[key]).__name__}")
    tags = values.get("marker_tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ConfigError("marker_tags must be a string or a list of strings")


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or file missing."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config: defaults < YAML data < environment variables."""
    known = {f.name for f in fields(Config)}
    values = {k: v for k, v in (yaml_data or {}).items() if k in known}
    unknown = set(yaml_data or {}) - known
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    if isinstance(values.get("marker_tags"), str):
        values["marker_tags"] = [values["marker_tags"]]
    _check_types(values)

    if "MDGALLERY_VAULT_DIR" in os.environ:
        values["vault_dir"] = os.environ["MDGALLERY_VAULT_DIR"]
    if "MDGALLERY_MARKER_TAGS" in os.environ:
        values["marker_tags"] = _split_csv(os.environ["MDGALLERY_MARKER_TAGS"])
    if "MDGALLERY_LOG_LEVEL" in os.environ:
        values["log_level"] = os.environ["MDGALLERY_LOG_LEVEL"]

    config = Config(**values)
    if config.output_format not in ("text", "json"):
        raise ConfigError(f"output_format must be 'text' or 'json', got {config.output_format!r}")
    if not config.marker_tags:
        raise ConfigError("marker_tags must not be empty")
    return config
