"""Application service: Build Report use case.

The builder is chosen by the caller (see ``bootstrap.report_builder``);
the director always assembles the same daily report.
"""

from __future__ import annotations

from creational.domain.builder.report_builder import ReportBuilder
from creational.domain.model.report import Report
from creational.domain.service.report_director import ReportDirector


class BuildReportHandler:

    def __init__(self, builder: ReportBuilder) -> None:
        self._builder = builder

    def handle(self) -> Report:
        ReportDirector().construct(self._builder)
        return self._builder.build()
