"""Application service: Get Setting use case (query)."""

from __future__ import annotations

from creational.domain.repository.configuration_repository import (
    ConfigurationRepository,
)


class GetSettingHandler:

    def __init__(self, config_repo: ConfigurationRepository) -> None:
        self._config_repo = config_repo

    def handle(self, key: str) -> str:
        """Return the stored value for *key*; raises ConfigKeyNotFoundError if absent."""
        return self._config_repo.load().get(key)
