"""
YAGNI: after

Exactly the CSV export that was requested. Other formats get added when
someone needs them, and not before.
"""

import csv
import io


def export_csv(rows: list[list]) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerows(rows)
    return buffer.getvalue()


def demo() -> list[str]:
    rows = [["name", "total"], ["Ada", 3], ["Bob", 5]]
    return [
        f"csv: {export_csv(rows)!r}",
        "options: none, export_csv() takes only the rows",
    ]
