"""Abstract report builder.

Each concrete builder decides how the three report parts are formatted;
callers (the ReportDirector) only see this contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from creational.domain.model.report import Report


class ReportBuilder(ABC):

    @abstractmethod
    def set_header(self, header: str) -> None:
        """Format and store the report header."""

    @abstractmethod
    def set_content(self, content: str) -> None:
        """Format and store the report body."""

    @abstractmethod
    def set_footer(self, footer: str) -> None:
        """Format and store the report footer."""

    @abstractmethod
    def build(self) -> Report:
        """Return the assembled report. Unset parts are empty strings."""
