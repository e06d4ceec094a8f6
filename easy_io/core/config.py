"""
Configuration for easy-io.

Settings are read from a YAML file whose values live under a top-level
``easy_io`` key. A missing or unreadable file falls back to the defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_ENV_VAR = "EASY_IO_CONFIG"
DEFAULT_CONFIG_PATH = "easy_io.yaml"


@dataclass
class Settings:
    """Process-wide settings for easy-io operations."""
    encoding: str = "utf-8"
    audit_enabled: bool = False
    audit_log_path: str = "data/audit_log.jsonl"
    diagnostics_enabled: bool = True

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Settings":
        """Build settings from the ``easy_io`` section of a config file."""
        defaults = cls()
        audit = config.get("audit", {}) or {}
        diagnostics = config.get("diagnostics", {}) or {}
        return cls(
            encoding=config.get("encoding", defaults.encoding),
            audit_enabled=bool(audit.get("enabled", defaults.audit_enabled)),
            audit_log_path=str(audit.get("log_path", defaults.audit_log_path)),
            diagnostics_enabled=bool(diagnostics.get("enabled", defaults.diagnostics_enabled)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to the ``easy_io`` section layout."""
        return {
            "encoding": self.encoding,
            "audit": {
                "enabled": self.audit_enabled,
                "log_path": self.audit_log_path,
            },
            "diagnostics": {
                "enabled": self.diagnostics_enabled,
            },
        }


def resolve_config_path(config_path: Optional[str] = None) -> Path:
    """
    Work out which config file to read.

    Args:
        config_path: Explicit path, takes precedence over the environment

    Returns:
        Path to the config file (it may not exist)
    """
    if config_path is not None:
        return Path(config_path)
    return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file (default: $EASY_IO_CONFIG or easy_io.yaml)

    Returns:
        Settings read from the file, or the defaults if it is missing or invalid
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return Settings()

    if not isinstance(config, dict):
        return Settings()
    return Settings.from_dict(config.get("easy_io", config) or {})


def save_settings(settings: Settings, config_path: str) -> None:
    """
    Save settings to a YAML file, keeping any other top-level sections.

    Args:
        settings: Settings to write
        config_path: Path to the YAML file
    """
    path = Path(config_path)
    config: Dict[str, Any] = {"easy_io": settings.to_dict()}

    # Merge with existing config
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                existing = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            existing = {}
        if isinstance(existing, dict):
            existing["easy_io"] = config["easy_io"]
            config = existing

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Replace the process-wide settings. ``None`` reloads them on next use."""
    global _settings
    _settings = settings
