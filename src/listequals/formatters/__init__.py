from listequals.formatters.base import (
    BaseFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget
)
from listequals.formatters.report import ReportFormatter, SummaryFormatter, format_report


__all__ = [
    "BaseFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget",
    "ReportFormatter", "SummaryFormatter", "format_report"
]


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()
