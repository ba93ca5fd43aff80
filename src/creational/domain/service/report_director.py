"""Domain service: Report Director.

Knows the order in which a report is assembled and what goes into it,
but not how any part is formatted; that is the builder's job.
"""

from __future__ import annotations

from creational.domain.builder.report_builder import ReportBuilder

DAILY_REPORT_HEADER = "Daily report"
DAILY_REPORT_CONTENT = "Sales and statistics"
DAILY_REPORT_FOOTER = "End of report"


class ReportDirector:

    def construct(self, builder: ReportBuilder) -> None:
        """Feed the daily report to *builder*: header, then content, then footer."""
        builder.set_header(DAILY_REPORT_HEADER)
        builder.set_content(DAILY_REPORT_CONTENT)
        builder.set_footer(DAILY_REPORT_FOOTER)
