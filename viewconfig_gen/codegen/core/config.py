"""
Configuration for code generation.

Settings are layered: per-generator defaults, then an optional JSON config
file, then explicit overrides (usually from the command line).
"""

import json
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Dict, Any, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all generators."""

    # Output
    output_dir: Optional[str] = None
    file_extension: str = ".js"

    # Code style
    indent_size: int = 2
    use_tabs: bool = False
    trailing_comma: bool = True

    # Keys no field claims end up here
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


_FIELD_NAMES = frozenset(f.name for f in fields(GeneratorConfig))

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "viewconfig": {
        "file_extension": ".js",
        "indent_size": 2,
        "use_tabs": False,
        "trailing_comma": True,
    },
}


class ConfigManager:
    """Builds GeneratorConfig instances from defaults, files and overrides."""

    def __init__(self):
        self._defaults: Dict[str, Dict[str, Any]] = {
            name: dict(values) for name, values in DEFAULTS.items()
        }

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge defaults, config file and overrides for a generator.

        Args:
            language: Generator name
            custom_config: Overrides applied last
            config_file: Path to a JSON config file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the config file cannot be used
        """
        merged = dict(self._defaults.get(language, {}))
        if config_file:
            merged.update(self._load_config_file(config_file))
        if custom_config:
            merged.update(custom_config)
        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return data

    def _dict_to_config(self, values: Dict[str, Any]) -> GeneratorConfig:
        known = {key: value for key, value in values.items() if key in _FIELD_NAMES}
        extra = {key: value for key, value in values.items() if key not in _FIELD_NAMES}

        if extra:
            known["custom"] = {**known.get("custom", {}), **extra}
        return GeneratorConfig(**known)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a config as a flat JSON object that get_config can read back."""
        data = asdict(config)
        data.update(data.pop("custom"))

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {output_path}: {e}") from e

    def list_languages(self) -> list[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """Return warnings for settings that would produce odd output."""
        warnings = []

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")
        if not config.file_extension.startswith("."):
            warnings.append(
                f"file_extension should start with '.': {config.file_extension}"
            )

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "viewconfig",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Merge defaults, config file and overrides using the global manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
