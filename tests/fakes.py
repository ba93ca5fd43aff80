"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the file repositories
but keep everything in memory: no file I/O, no side effects.
"""

from __future__ import annotations

from creational.domain.model.configuration import Configuration
from creational.domain.repository.configuration_repository import (
    ConfigurationRepository,
)


class FakeConfigurationRepository(ConfigurationRepository):

    def __init__(
        self,
        settings: dict[str, str] | None = None,
        fail_on_save: bool = False,
    ) -> None:
        self._store: dict[str, str] = dict(settings or {})
        self._fail_on_save = fail_on_save
        self.save_calls = 0

    def load(self) -> Configuration:
        return Configuration(settings=dict(self._store))

    def save(self, config: Configuration) -> bool:
        self.save_calls += 1
        if self._fail_on_save:
            return False
        self._store = dict(config.items())
        return True

    @property
    def stored(self) -> dict[str, str]:
        return dict(self._store)
