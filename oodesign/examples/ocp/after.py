"""
OCP: after

Formats are plug-ins behind a Formatter abstraction. Adding one is a new
class and a register() call; existing code stays closed for modification.
"""

import json
from abc import ABC, abstractmethod


class UnsupportedFormatError(ValueError):
    """Raised when a report is requested in a format nobody registered."""


class Formatter(ABC):
    name: str

    @abstractmethod
    def format(self, report: dict) -> str:
        """Render `report` as text."""


class JsonFormatter(Formatter):
    name = "json"

    def format(self, report: dict) -> str:
        return json.dumps(report, sort_keys=True)


class CsvFormatter(Formatter):
    name = "csv"

    def format(self, report: dict) -> str:
        lines = ["key,value"] + [f"{key},{value}" for key, value in sorted(report.items())]
        return "\n".join(lines)


class FormatterRegistry:
    def __init__(self, formatters=()):
        self._formatters = {}
        for formatter in formatters:
            self.register(formatter)

    def register(self, formatter: Formatter) -> None:
        self._formatters[formatter.name] = formatter

    def formats(self) -> list[str]:
        return sorted(self._formatters)

    def format(self, report: dict, fmt: str) -> str:
        formatter = self._formatters.get(fmt)
        if formatter is None:
            raise UnsupportedFormatError(f"Unsupported format: {fmt}")
        return formatter.format(report)


class MarkdownFormatter(Formatter):
    """Added later without touching anything above."""
    name = "markdown"

    def format(self, report: dict) -> str:
        rows = [f"| {key} | {value} |" for key, value in sorted(report.items())]
        return "\n".join(["| key | value |", "| --- | --- |"] + rows)


def demo() -> list[str]:
    report = {"orders": 3, "revenue": 42}
    registry = FormatterRegistry([JsonFormatter(), CsvFormatter()])
    registry.register(MarkdownFormatter())
    return [f"{fmt}: {registry.format(report, fmt)!r}" for fmt in registry.formats()]
