"""Application service: List Settings use case (query)."""

from __future__ import annotations

from creational.application.dto import SettingDTO
from creational.domain.repository.configuration_repository import (
    ConfigurationRepository,
)


class ListSettingsHandler:

    def __init__(self, config_repo: ConfigurationRepository) -> None:
        self._config_repo = config_repo

    def handle(self) -> list[SettingDTO]:
        config = self._config_repo.load()
        return [SettingDTO(key=key, value=value) for key, value in config.items()]
