"""
Generator configuration.

Settings are resolved in three layers: built-in defaults per target, an
optional JSON config file, then explicit overrides (usually CLI flags).
Keys that are not fields of :class:`GeneratorConfig` end up in its
``custom`` dict, where target-specific settings such as the Spring project
name live.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for invalid or unreadable configuration."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all generators."""

    package_name: str = ""

    # Layout of generated text
    indent_size: int = 2
    use_tabs: bool = False
    line_ending: str = "\n"
    add_comments: bool = True

    # Target-specific settings
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent_unit(self) -> str:
        """Whitespace emitted per indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size


_JAVA_STYLE = {"indent_size": 2}

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "spring": {
        **_JAVA_STYLE,
        "custom": {
            "use_interface": False,
            "use_demo": False,
            "incremental": False,
            "include_api": False,
        },
    },
    "java": {**_JAVA_STYLE, "custom": {"accessors": True}},
}


class ConfigManager:
    """Resolves a :class:`GeneratorConfig` for a target."""

    def __init__(self):
        self._defaults = {name: dict(values) for name, values in DEFAULTS.items()}

    def get_config(
        self,
        language: str = "spring",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge defaults, config file and overrides for ``language``.

        Args:
            language: Target name
            custom_config: Overrides applied last
            config_file: Optional JSON file applied over the defaults

        Raises:
            ConfigError: If the config file cannot be used
        """
        defaults = self._defaults.get(language, {})
        merged = {**defaults, "custom": dict(defaults.get("custom", {}))}

        for layer in (self._read_file(config_file) if config_file else None, custom_config):
            if layer:
                self._merge(merged, layer)

        logger.debug("Resolved %s configuration: %s", language, merged)
        return self._to_config(merged)

    @staticmethod
    def _merge(base: Dict[str, Any], layer: Dict[str, Any]):
        for key, value in layer.items():
            if key == "custom" and isinstance(value, dict):
                base["custom"].update(value)
            else:
                base[key] = value

    @staticmethod
    def _read_file(config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        logger.info("Loaded configuration from %s", path)
        return data

    @staticmethod
    def _to_config(values: Dict[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(GeneratorConfig)}
        kwargs = {k: v for k, v in values.items() if k in known}
        extra = {k: v for k, v in values.items() if k not in known}
        if extra:
            kwargs["custom"] = {**kwargs.get("custom", {}), **extra}
        return GeneratorConfig(**kwargs)

    def list_languages(self) -> List[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Warnings for language-independent settings that look wrong."""
        warnings = []
        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")
        if config.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")
        return warnings


_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def load_config(
    language: str = "spring",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Resolve configuration through the shared :class:`ConfigManager`."""
    return get_config_manager().get_config(language, custom_config, config_file)


# Sample config file contents
EXAMPLE_SPRING_CONFIG = {
    "name": "petstore",
    "package": "com.example.petstore.server",
    "indent_size": 4,
    "use_interface": False,
    "use_demo": True,
}
