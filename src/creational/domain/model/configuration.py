"""Configuration: the application's key/value settings.

A plain object that is constructed explicitly (usually by a
ConfigurationRepository) and passed to whoever needs it.  Keys keep
their insertion order so a save writes them back in a stable order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from creational.domain.exceptions import ConfigKeyNotFoundError


@dataclass
class Configuration:

    settings: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        """Return the value stored under *key*.

        Raises ConfigKeyNotFoundError if the key is absent; there is no
        default value.
        """
        if key not in self.settings:
            raise ConfigKeyNotFoundError(f"Setting not found: {key}")
        return self.settings[key]

    def set(self, key: str, value: str) -> None:
        self.settings[key] = value

    def items(self) -> list[tuple[str, str]]:
        return list(self.settings.items())

    def __contains__(self, key: object) -> bool:
        return key in self.settings

    def __iter__(self) -> Iterator[str]:
        return iter(self.settings)

    def __len__(self) -> int:
        return len(self.settings)
