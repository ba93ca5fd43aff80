"""Abstract repository for the Configuration settings.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete text-file implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from creational.domain.model.configuration import Configuration


class ConfigurationRepository(ABC):

    @abstractmethod
    def load(self) -> Configuration:
        """Return the stored settings, or an empty Configuration if none can be read."""

    @abstractmethod
    def save(self, config: Configuration) -> bool:
        """Persist every setting. Return False if the write failed."""
