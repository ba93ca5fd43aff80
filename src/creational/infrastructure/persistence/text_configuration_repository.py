"""Text-file-backed implementation of ConfigurationRepository.

File format: one ``key=value`` pair per line, ended by "\n", "\r\n" or
"\r".  Trailing empty fields are dropped from a line, and it is only
accepted when exactly two parts remain; anything else is skipped.
I/O failures never leave this module: a failed load yields an empty
Configuration, a failed save returns False.  Both are logged.
"""

from __future__ import annotations

import logging
from pathlib import Path

from creational.domain.exceptions import FileAccessError
from creational.domain.model.configuration import Configuration
from creational.domain.repository.configuration_repository import (
    ConfigurationRepository,
)

logger = logging.getLogger(__name__)


class TextConfigurationRepository(ConfigurationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ConfigurationRepository interface ------------------------------------

    def load(self) -> Configuration:
        try:
            text = self._read_text()
        except FileAccessError as exc:
            logger.warning(
                "Could not read configuration file, starting empty (%s)", exc
            )
            return Configuration()
        config = self._parse(text)
        logger.debug("Loaded %d setting(s) from %s", len(config), self._file_path)
        return config

    def save(self, config: Configuration) -> bool:
        try:
            self._write_text(self._serialize(config))
        except FileAccessError as exc:
            logger.error("Failed to save configuration: %s", exc)
            return False
        logger.debug("Saved %d setting(s) to %s", len(config), self._file_path)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _parse(text: str) -> Configuration:
        config = Configuration()
        # read_text() has already folded "\r\n" and "\r" into "\n".
        for line in text.split("\n"):
            parts = line.split("=")
            while parts and not parts[-1]:
                parts.pop()
            if len(parts) != 2:
                continue
            key, value = parts
            config.set(key, value)
        return config

    @staticmethod
    def _serialize(config: Configuration) -> str:
        return "".join(f"{key}={value}\n" for key, value in config.items())

    # --- File helpers ---------------------------------------------------------

    def _read_text(self) -> str:
        try:
            return self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(f"Cannot read {self._file_path}: {exc}") from exc

    def _write_text(self, text: str) -> None:
        try:
            self._file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise FileAccessError(f"Cannot write {self._file_path}: {exc}") from exc
