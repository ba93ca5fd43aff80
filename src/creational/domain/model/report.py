"""Report: the product assembled by a ReportBuilder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Report:
    header: str
    content: str
    footer: str
