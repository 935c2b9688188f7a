"""Report adapters."""

from review_radar.adapters.report.markdown_report import MarkdownReportGenerator

__all__ = ["MarkdownReportGenerator"]
