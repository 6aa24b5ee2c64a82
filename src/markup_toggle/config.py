"""
Configuration management for markup-toggle.

Handles loading and managing configuration from files and environment
variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .tools.base import ToolStyles
from .tools.locator import DEFAULT_SEARCH_DEPTH

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ToolSettings(BaseModel):
    """Settings for one markup toggle tool."""

    tag: str
    title: Optional[str] = None
    search_depth: int = Field(default=DEFAULT_SEARCH_DEPTH, ge=1)

    @field_validator("tag")
    @classmethod
    def _normalise_tag(cls, value: str) -> str:
        value = value.strip().lower()
        if not value or not value.isalnum():
            raise ValueError(f"Tag must be a non-empty alphanumeric name, got {value!r}")
        return value


@dataclass
class MarkupToggleConfig:
    """Main configuration for markup-toggle."""

    # Tag used when no tool is named explicitly
    default_tag: str = "sup"
    search_depth: int = DEFAULT_SEARCH_DEPTH

    log_level: str = "WARNING"

    # Extra tools, keyed by tool name
    tools: Dict[str, ToolSettings] = field(default_factory=dict)

    styles: ToolStyles = field(default_factory=ToolStyles)


class ConfigManager:
    """Manages markup-toggle configuration from multiple sources."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / '.markup-toggle'
        self.config_file = self.config_dir / 'config.yaml'
        self._config: Optional[MarkupToggleConfig] = None

    def load_config(self) -> MarkupToggleConfig:
        """Load configuration from all sources."""
        if self._config:
            return self._config

        # Start with defaults
        config = MarkupToggleConfig()

        # Load from file if it exists
        if self.config_file.exists():
            file_config = self._load_from_file()
            config = self._merge_configs(config, file_config)

        # Override with environment variables
        env_config = self._load_from_env()
        config = self._merge_configs(config, env_config)

        self._config = config
        return config

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config file {self.config_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file}: top level is not a mapping")
            return {}
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        tag = os.getenv('MARKUP_TOGGLE_TAG')
        if tag:
            env_config['default_tag'] = tag

        search_depth = os.getenv('MARKUP_TOGGLE_SEARCH_DEPTH')
        if search_depth:
            try:
                env_config['search_depth'] = int(search_depth)
            except ValueError:
                pass

        log_level = os.getenv('MARKUP_TOGGLE_LOG_LEVEL')
        if log_level:
            env_config['log_level'] = log_level

        return env_config

    def _merge_configs(self, base: MarkupToggleConfig, override: Dict[str, Any]) -> MarkupToggleConfig:
        """Merge a raw configuration mapping into ``base``."""
        if 'default_tag' in override:
            try:
                base.default_tag = ToolSettings(tag=str(override['default_tag'])).tag
            except ValidationError as e:
                logger.warning(f"Ignoring invalid default_tag: {e}")

        if 'search_depth' in override:
            try:
                depth = int(override['search_depth'])
            except (TypeError, ValueError):
                depth = 0
            if depth >= 1:
                base.search_depth = depth
            else:
                logger.warning(f"Ignoring invalid search_depth: {override['search_depth']!r}")

        if 'log_level' in override:
            level = str(override['log_level']).upper()
            if level in LOG_LEVELS:
                base.log_level = level
            else:
                logger.warning(f"Ignoring unknown log_level: {override['log_level']!r}")

        # Tools config
        tools = override.get('tools') or {}
        if not isinstance(tools, dict):
            logger.warning(f"Ignoring tools section: expected a mapping, got {type(tools).__name__}")
            tools = {}
        for name, settings in tools.items():
            try:
                base.tools[name] = ToolSettings.model_validate(settings)
            except ValidationError as e:
                logger.warning(f"Ignoring invalid settings for tool {name!r}: {e}")

        # Styles
        if 'styles' in override:
            style_overrides = override['styles'] or {}
            if not isinstance(style_overrides, dict):
                logger.warning(
                    f"Ignoring styles section: expected a mapping, got {type(style_overrides).__name__}"
                )
                style_overrides = {}
            if 'inline_tool_button' in style_overrides:
                base.styles.inline_tool_button = style_overrides['inline_tool_button']
            if 'inline_tool_button_active' in style_overrides:
                base.styles.inline_tool_button_active = style_overrides['inline_tool_button_active']

        return base

    def save_config(self, config: MarkupToggleConfig) -> None:
        """Save configuration to file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        config_dict = {
            'default_tag': config.default_tag,
            'search_depth': config.search_depth,
            'log_level': config.log_level,
            'tools': {
                name: settings.model_dump(exclude_none=True)
                for name, settings in config.tools.items()
            },
            'styles': {
                'inline_tool_button': config.styles.inline_tool_button,
                'inline_tool_button_active': config.styles.inline_tool_button_active,
            },
        }

        try:
            with open(self.config_file, 'w') as f:
                yaml.dump(config_dict, f, default_flow_style=False, indent=2)
        except OSError as e:
            logger.warning(f"Could not save config file {self.config_file}: {e}")

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(MarkupToggleConfig())
        logger.info(f"Created default configuration at {self.config_file}")

    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        config = self.load_config()

        return {
            'config_file': str(self.config_file),
            'config_exists': self.config_file.exists(),
            'default_tag': config.default_tag,
            'search_depth': config.search_depth,
            'log_level': config.log_level,
            'tools': sorted(config.tools),
        }


# Global config manager instance
_config_manager: Optional[ConfigManager] = None

def get_config_manager() -> ConfigManager:
    """Get the global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager

def load_config() -> MarkupToggleConfig:
    """Load the current configuration."""
    return get_config_manager().load_config()
