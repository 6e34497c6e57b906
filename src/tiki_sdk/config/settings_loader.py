"""
Settings Loader
Loads process-wide Tiki settings from various sources
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from tiki_sdk.config.settings import ENV_VAR_MAPPING, TikiSettings
from tiki_sdk.exceptions import ConfigError
from tiki_sdk.utils.helpers import clean_none


class SettingsLoader:
    """
    SettingsLoader class
    Provides multiple ways to load and merge settings
    """

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load settings from a JSON file

        Args:
            path: Path to JSON settings file

        Returns:
            Loaded settings dictionary

        Raises:
            ConfigError: If file not found or invalid JSON
        """
        file_path = Path(path).resolve()

        if not file_path.exists():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(
                f"Configuration file must contain a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR"
            )
        return config

    def from_environment(self) -> Dict[str, Any]:
        """
        Load settings from environment variables

        Returns:
            Settings dictionary from environment variables
        """
        config: Dict[str, Any] = {}

        for env_var, config_key in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var)
            if value is None or value == "":
                continue

            if config_key.startswith("credential."):
                credential_key = config_key.split(".", 1)[1]
                config.setdefault("credential", {})[credential_key] = value
            else:
                config[config_key] = self._parse_env_value(config_key, value)

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of a settings dictionary"""
        copied = config.copy()
        if isinstance(copied.get("credential"), dict):
            copied["credential"] = copied["credential"].copy()
        return copied

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple settings sources
        Priority: later sources override earlier sources.
        The credential mapping is merged key by key.

        Args:
            sources: Settings dictionaries in order of increasing priority

        Returns:
            Merged settings dictionary
        """
        merged: Dict[str, Any] = {}

        for source in sources:
            filtered = clean_none(source)
            credential = filtered.pop("credential", None)
            merged.update(filtered)
            if credential is not None and not isinstance(credential, dict):
                # left for TikiSettings to reject
                merged["credential"] = credential
            elif credential:
                base = merged.get("credential")
                merged["credential"] = {
                    **(base if isinstance(base, dict) else {}),
                    **clean_none(credential),
                }

        return merged

    def resolve(self, config: Dict[str, Any]) -> TikiSettings:
        """
        Build TikiSettings from a merged dictionary

        Raises:
            ConfigError: If settings are invalid
        """
        try:
            return TikiSettings(**config)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigError(
                f"Configuration validation failed: {', '.join(fields)}",
                details={"fields": fields},
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> TikiSettings:
        """
        Load, merge, and resolve settings from multiple sources

        Args:
            file: Path to JSON settings file (optional)
            env: Whether to load from environment variables (default: True)
            config: Programmatic settings dictionary (optional)

        Returns:
            Resolved TikiSettings object
        """
        sources: list[Dict[str, Any]] = []

        if file is not None:
            sources.append(self.from_file(file))

        if env:
            sources.append(self.from_environment())

        if config is not None:
            sources.append(self.from_dict(config))

        return self.resolve(self.merge(*sources))

    def _parse_env_value(self, key: str, value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if key == "timeout":
            try:
                return int(value)
            except ValueError:
                return value

        return value
