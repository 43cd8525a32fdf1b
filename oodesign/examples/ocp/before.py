"""
OCP: before

Every new output format means reopening ReportFormatter.format and growing
its if/elif chain.
"""

import json


class UnsupportedFormatError(ValueError):
    """Raised when a report is requested in a format nobody implemented."""


class ReportFormatter:
    def format(self, report: dict, fmt: str) -> str:
        if fmt == "json":
            return json.dumps(report, sort_keys=True)
        elif fmt == "csv":
            lines = ["key,value"] + [f"{key},{value}" for key, value in sorted(report.items())]
            return "\n".join(lines)
        raise UnsupportedFormatError(f"Unsupported format: {fmt}")


def demo() -> list[str]:
    report = {"orders": 3, "revenue": 42}
    formatter = ReportFormatter()
    lines = [f"{fmt}: {formatter.format(report, fmt)!r}" for fmt in ("json", "csv")]
    try:
        formatter.format(report, "markdown")
    except UnsupportedFormatError as exc:
        lines.append(f"markdown: {exc} (needs an edit to ReportFormatter)")
    return lines
