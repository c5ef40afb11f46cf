"""JSON file store for integration settings."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.core.config_checks import ensure_valid_config
from src.core.errors import ConfigFileError
from src.models.integration_config import CONFIG_VERSION, IntegrationConfig
from src.utils.logger import get_logger
from src.utils.validation import DEFAULT_API_KEY_MIN_LENGTH

logger = get_logger(__name__)

CONFIG_FILE_PERMISSIONS = 0o600


class ConfigStore:
    """Reads and writes the integration config file.

    Settings are checked before anything is written, so an invalid
    config never reaches disk.
    """

    def __init__(
        self,
        path: str | Path,
        api_key_min_length: int = DEFAULT_API_KEY_MIN_LENGTH,
    ) -> None:
        self.path = Path(path).expanduser()
        self.api_key_min_length = api_key_min_length

    def _read_raw(self) -> dict[str, Any]:
        """Return the file's JSON object, or {} if the file is missing.

        Raises ConfigFileError if the file is unreadable or not a JSON object.
        """
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigFileError(str(self.path), f"unreadable: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigFileError(str(self.path), "expected a JSON object")
        return data

    def _parse(self, raw: dict[str, Any]) -> IntegrationConfig:
        try:
            return IntegrationConfig.model_validate(raw)
        except ValidationError as exc:
            msg = f"does not match the settings schema ({exc.error_count()} error(s))"
            raise ConfigFileError(str(self.path), msg) from exc

    def load_strict(self) -> IntegrationConfig:
        """Load the stored config, raising ConfigFileError if the file is broken."""
        return self._parse(self._read_raw())

    def load(self) -> IntegrationConfig:
        """Load the stored config, or an empty one if the file is missing or broken."""
        try:
            return self.load_strict()
        except ConfigFileError as exc:
            logger.warning("config_file_invalid", path=exc.path, reason=exc.reason)
            return IntegrationConfig()

    def save(self, config: IntegrationConfig) -> IntegrationConfig:
        """Merge over the existing file, validate, and write with owner-only permissions.

        The merged result is checked before writing. Raises
        ConfigValidationError or ConfigFileError without touching the file.
        Returns the merged config that was written.
        """
        ensure_valid_config(config, self.api_key_min_length)

        try:
            existing = self._read_raw()
        except ConfigFileError as exc:
            logger.warning("config_file_replaced", path=exc.path, reason=exc.reason)
            existing = {}
        updates = config.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        merged = {**existing, **updates, "version": CONFIG_VERSION}

        merged_config = self._parse(merged)
        ensure_valid_config(merged_config, self.api_key_min_length)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(merged, indent=2), encoding="utf-8")
        try:
            os.chmod(self.path, CONFIG_FILE_PERMISSIONS)
        except OSError as exc:
            logger.warning("config_permissions_not_set", path=str(self.path), error=str(exc))

        logger.info("config_saved", path=str(self.path), sections=sorted(updates))
        return merged_config
