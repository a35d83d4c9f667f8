"""
Configuration management for the build tool
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from ..types import BuildConfig

DEFAULTS_FILE = Path(__file__).parent / "build.yaml"
PROJECT_CONFIG_NAME = "creo.build.yaml"


class ConfigLoader:
    """Loads build settings and produces the immutable BuildConfig"""

    def __init__(self, root_dir: Optional[Path] = None, config_file: Optional[Path] = None):
        """
        Initialize configuration loader

        Args:
            root_dir: Project root directory
            config_file: Explicit override file (defaults to <root>/creo.build.yaml)
        """
        self.root_dir = Path(root_dir or Path.cwd()).resolve()
        self.config_file = Path(config_file) if config_file else None

        self.settings = self._read_yaml(DEFAULTS_FILE)

        override_file = self.config_file or self.root_dir / PROJECT_CONFIG_NAME
        if override_file.exists():
            self.settings.update(self._read_yaml(override_file))
        elif self.config_file is not None:
            raise ConfigError(f"Config file not found: {self.config_file}")

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping")
        return data

    def _resolve(self, value: str) -> Path:
        path = Path(value)
        return path if path.is_absolute() else self.root_dir / path

    def read_version(self) -> str:
        """
        Read the declared version from the package manifest

        Returns:
            Version string
        """
        manifest = self._resolve(self.settings.get("manifest", "package.json"))
        try:
            with open(manifest, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Package manifest not found: {manifest}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read package manifest {manifest}: {e}") from e

        version = data.get("version") if isinstance(data, dict) else None
        if not version:
            raise ConfigError(f"No version declared in {manifest}")
        return str(version)

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def load(self, **overrides: Any) -> BuildConfig:
        """
        Build the BuildConfig

        Args:
            overrides: Field values taking precedence over the files

        Returns:
            Immutable build configuration
        """
        fields = {
            key: value for key, value in self.settings.items()
            if key in BuildConfig.model_fields
        }
        fields["root_dir"] = self.root_dir
        fields["src_dir"] = self._resolve(self.settings.get("src_dir", "scss"))
        fields["dist_dir"] = self._resolve(self.settings.get("dist_dir", "dist"))
        if "version" not in overrides:
            fields["version"] = self.read_version()
        fields.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return BuildConfig(**fields)
        except ValidationError as e:
            raise ConfigError(f"Invalid build configuration: {e}") from e


__all__ = ["ConfigLoader", "DEFAULTS_FILE", "PROJECT_CONFIG_NAME"]
