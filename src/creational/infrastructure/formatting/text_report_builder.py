"""Plain-text implementation of ReportBuilder."""

from __future__ import annotations

from creational.domain.builder.report_builder import ReportBuilder
from creational.domain.model.report import Report


class TextReportBuilder(ReportBuilder):

    def __init__(self) -> None:
        self._header = ""
        self._content = ""
        self._footer = ""

    def set_header(self, header: str) -> None:
        self._header = f"TEXT HEADER: {header}"

    def set_content(self, content: str) -> None:
        self._content = f"TEXT CONTENT: {content}"

    def set_footer(self, footer: str) -> None:
        self._footer = f"TEXT FOOTER: {footer}"

    def build(self) -> Report:
        return Report(header=self._header, content=self._content, footer=self._footer)
