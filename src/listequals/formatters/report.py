from typing import List, Optional

from listequals.algorithms.utils import DiffEntry, count_entries
from listequals.formatters.base import BaseFormatter, FormatterConfig, FormatterFactory


class ReportFormatter(BaseFormatter):
    """Renders entries as the ``difference:`` block.

    The header is always written; there is no trailing newline, so the
    result can be used directly as an assertion message.
    """

    def _format_impl(self, entries: List[DiffEntry]):
        self._write(self.config.header)
        limit = self.config.max_entries
        shown = entries if limit is None else entries[:limit]
        for entry in shown:
            color = self.colors.for_kind(entry.kind)
            self._write(f"\n{self.config.bullet}{color}{entry}{self.colors.reset}")
        hidden = len(entries) - len(shown)
        if hidden:
            self._write(f"\n{self.config.bullet}... and {hidden} more")


class SummaryFormatter(BaseFormatter):
    def _format_impl(self, entries: List[DiffEntry]):
        counts = count_entries(entries)
        self._write(
            f"{counts['added']} unexpected, {counts['removed']} missing, "
            f"{counts['changed']} changed"
        )


FormatterFactory.register("report", ReportFormatter)
FormatterFactory.register("summary", SummaryFormatter)


def format_report(entries: List[DiffEntry], config: Optional[FormatterConfig] = None) -> str:
    return ReportFormatter(config).format(entries)
