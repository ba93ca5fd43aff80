"""Application service: Set Setting use case.

Loads the current settings, overwrites one key and saves everything
back.  A failed save is reported through the return value, not raised.
"""

from __future__ import annotations

from creational.domain.exceptions import ValidationError
from creational.domain.repository.configuration_repository import (
    ConfigurationRepository,
)


class SetSettingHandler:

    def __init__(self, config_repo: ConfigurationRepository) -> None:
        self._config_repo = config_repo

    def handle(self, key: str, value: str) -> bool:
        # The file format cannot represent these; they would be dropped on reload.
        if not key or _unstorable(key):
            raise ValidationError(f"Invalid setting key: {key!r}")
        if not value or _unstorable(value):
            raise ValidationError(f"Invalid value for setting '{key}': {value!r}")

        config = self._config_repo.load()
        config.set(key, value)
        return self._config_repo.save(config)


def _unstorable(text: str) -> bool:
    return "=" in text or "\n" in text or "\r" in text
