"""HTML implementation of ReportBuilder.

Text is inserted as given; callers that pass untrusted input are
responsible for escaping it.
"""

from __future__ import annotations

from creational.domain.builder.report_builder import ReportBuilder
from creational.domain.model.report import Report


class HtmlReportBuilder(ReportBuilder):

    def __init__(self) -> None:
        self._header = ""
        self._content = ""
        self._footer = ""

    def set_header(self, header: str) -> None:
        self._header = f"<h1>{header}</h1>"

    def set_content(self, content: str) -> None:
        self._content = f"<p>{content}</p>"

    def set_footer(self, footer: str) -> None:
        self._footer = f"<footer>{footer}</footer>"

    def build(self) -> Report:
        return Report(header=self._header, content=self._content, footer=self._footer)
