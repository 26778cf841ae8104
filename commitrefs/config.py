"""User configuration for commitrefs.

Handles the optional user-level file ~/.commitrefs/config.yaml. Every key is
optional; a missing file means all defaults.
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from commitrefs.extractors.constants import (
    DEFAULT_ISSUE_PATTERN,
    DEFAULT_STORY_URL_TEMPLATE,
    EXTRACTOR_ORDER,
    ExtractorKind,
)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""
    pass


_CONFIG_DIR = Path.home() / ".commitrefs"


class RefsConfig(BaseModel):
    """Settings for reference extraction and the commit wrapper.

    Attributes:
        extractors: Enabled extractors. Evaluation order is always the
            registration order, whatever order is listed here.
        issue_pattern: Regex for issue identifiers in branch names.
        story_url_template: URL template with a {story_id} placeholder.
        clipboard_command: argv used to read the clipboard, or None to
            auto-detect an installed clipboard utility.
        clipboard_timeout: Seconds to wait for the clipboard utility.
        quiet: Suppress the status line printed when references are added.
    """

    extractors: list[ExtractorKind] = list(EXTRACTOR_ORDER)
    issue_pattern: str = DEFAULT_ISSUE_PATTERN
    story_url_template: str = DEFAULT_STORY_URL_TEMPLATE
    clipboard_command: Optional[list[str]] = None
    clipboard_timeout: float = 2.0
    quiet: bool = False

    @field_validator("extractors", mode="before")
    @classmethod
    def ensure_extractors_list(cls, v):
        """Treat a null extractor list as all extractors."""
        if v is None:
            return list(EXTRACTOR_ORDER)
        return v

    @field_validator("issue_pattern")
    @classmethod
    def validate_issue_pattern(cls, v: str) -> str:
        """Ensure the issue pattern compiles and cannot match nothing."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regex: {e}")
        if compiled.fullmatch("") is not None:
            raise ValueError("pattern must not match an empty string")
        return v

    @field_validator("story_url_template")
    @classmethod
    def validate_story_url_template(cls, v: str) -> str:
        """Ensure the template has a {story_id} placeholder and no other fields."""
        if "{story_id}" not in v:
            raise ValueError("must contain a {story_id} placeholder")
        try:
            v.format(story_id="1")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"invalid template field: {e!r}")
        return v

    @field_validator("clipboard_command", mode="before")
    @classmethod
    def split_clipboard_command(cls, v):
        """Allow the clipboard command to be given as a single string."""
        if isinstance(v, str):
            return v.split()
        return v

    def is_enabled(self, kind: ExtractorKind) -> bool:
        """Check whether an extractor is enabled."""
        return kind in self.extractors


def get_config_dir() -> Path:
    """Get the commitrefs configuration directory.

    Returns:
        Path to ~/.commitrefs/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitrefs/config.yaml
    """
    return get_config_dir() / "config.yaml"


def load_config_dict() -> Dict[str, Any]:
    """Load the raw configuration dictionary.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return config


def load_config() -> RefsConfig:
    """Load and validate the user configuration.

    Returns:
        RefsConfig built from the config file, or defaults.

    Raises:
        ConfigError: If the file cannot be read or fails validation.
    """
    config_dict = load_config_dict()
    try:
        return RefsConfig(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {get_config_file_path()}:\n{e}")


def config_to_dict(config: RefsConfig) -> Dict[str, Any]:
    """Convert RefsConfig to a dictionary for saving.

    Args:
        config: RefsConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "extractors": [kind.value for kind in config.extractors],
        "issue_pattern": config.issue_pattern,
        "story_url_template": config.story_url_template,
        "clipboard_command": config.clipboard_command,
        "clipboard_timeout": config.clipboard_timeout,
        "quiet": config.quiet,
    }


def save_config(config: RefsConfig) -> Path:
    """Save configuration to ~/.commitrefs/config.yaml.

    Args:
        config: Configuration to save.

    Returns:
        Path of the written file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")
    return config_file
