from report_tool.config import Settings
from report_tool.report import ReportResult, generate_report

__all__ = ["Settings", "ReportResult", "generate_report"]
