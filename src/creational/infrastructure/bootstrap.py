"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from creational.domain.builder.report_builder import ReportBuilder
from creational.domain.exceptions import ValidationError
from creational.infrastructure.formatting.html_report_builder import (
    HtmlReportBuilder,
)
from creational.infrastructure.formatting.text_report_builder import (
    TextReportBuilder,
)
from creational.infrastructure.persistence.text_configuration_repository import (
    TextConfigurationRepository,
)

DEFAULT_CONFIG_FILE = Path("config.txt")

REPORT_FORMATS: dict[str, type[ReportBuilder]] = {
    "text": TextReportBuilder,
    "html": HtmlReportBuilder,
}


def configuration_repository(
    file_path: Path = DEFAULT_CONFIG_FILE,
) -> TextConfigurationRepository:
    return TextConfigurationRepository(file_path)


def report_builder(fmt: str) -> ReportBuilder:
    """Return a fresh builder for *fmt* ("text" or "html")."""
    try:
        builder_cls = REPORT_FORMATS[fmt.lower()]
    except KeyError:
        raise ValidationError(
            f"Unknown report format '{fmt}' (expected one of: "
            f"{', '.join(REPORT_FORMATS)})"
        ) from None
    return builder_cls()
