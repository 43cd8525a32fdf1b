"""
YAGNI: before

The only feature anybody asked for is a CSV export. The exporter nevertheless
ships plugin hooks, four formats and a compression switch that nothing uses.
"""

import csv
import io


class ExportPlugin:
    """Extension point for a requirement nobody has written down."""

    def before_export(self, rows: list[list]) -> list[list]:
        return rows

    def after_export(self, text: str) -> str:
        return text


class ReportExporter:
    SUPPORTED_FORMATS = ("csv", "xml", "pdf", "xlsx")

    def __init__(self, fmt="csv", delimiter=",", compress=False, plugins=None, cache_size=128):
        if fmt not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unknown format: {fmt}")
        self.fmt = fmt
        self.delimiter = delimiter
        self.compress = compress
        self.plugins = list(plugins or [])
        self.cache_size = cache_size  # reserved for a future cache
        self._cache = {}

    def export(self, rows: list[list]) -> str:
        for plugin in self.plugins:
            rows = plugin.before_export(rows)

        if self.fmt == "csv":
            text = self._to_csv(rows)
        else:
            raise NotImplementedError(f"{self.fmt} export is planned")

        if self.compress:
            raise NotImplementedError("compression is planned")

        for plugin in self.plugins:
            text = plugin.after_export(text)
        return text

    def _to_csv(self, rows: list[list]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerows(rows)
        return buffer.getvalue()


def demo() -> list[str]:
    rows = [["name", "total"], ["Ada", 3], ["Bob", 5]]
    exporter = ReportExporter(plugins=[ExportPlugin()])
    lines = [f"csv: {exporter.export(rows)!r}"]

    try:
        ReportExporter(fmt="xml").export(rows)
    except NotImplementedError as exc:
        lines.append(f"xml: NotImplementedError({exc})")

    lines.append(f"constructor options: {ReportExporter.__init__.__code__.co_argcount - 1}")
    return lines
