"""
Markdown Parser

Splits a markdown document into a heading tree with the fenced code blocks
and bullet items that belong to each heading. Only the subset of CommonMark
that handbook documents use is recognised: ATX headings, backtick/tilde
fences and `-`/`*`/`+` list items.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from oodesign.domain.models import CodeFence, MarkdownDocument, Section
from oodesign.infrastructure.config import DEFAULT_PYTHON_LANGUAGES

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
FENCE_OPEN_RE = re.compile(r"^( {0,3})(`{3,}|~{3,})(.*)$")
BULLET_RE = re.compile(r"^[ \t]*[-*+][ \t]+(.+)$")
THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")


class _OpenFence:
    """Bookkeeping for a fence that has been opened but not yet closed."""

    def __init__(self, indent: int, marker: str, info: str, line: int):
        self.indent = indent
        self.marker = marker
        self.info = info
        self.line = line
        self.lines: list[str] = []

    def closes_on(self, line: str) -> bool:
        stripped = line.rstrip()
        if len(line) - len(line.lstrip(" ")) > 3:
            return False
        candidate = stripped.lstrip(" ")
        char = self.marker[0]
        run = len(candidate) - len(candidate.lstrip(char))
        return run >= len(self.marker) and candidate == char * run

    def add(self, line: str) -> None:
        # Drop up to the opening fence's indentation, as CommonMark does
        removable = min(self.indent, len(line) - len(line.lstrip(" ")))
        self.lines.append(line[removable:])


class MarkdownParser:
    """Parse markdown text into a MarkdownDocument."""

    def __init__(self, python_languages: Iterable[str] = DEFAULT_PYTHON_LANGUAGES):
        self.python_languages = frozenset(lang.lower() for lang in python_languages)

    def parse_file(self, path: Path) -> MarkdownDocument:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Markdown file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        return self.parse(text, path=str(path))

    def parse(self, text: str, path: Optional[str] = None) -> MarkdownDocument:
        root = Section(level=0, title="", line=0)
        stack = [root]
        fence: Optional[_OpenFence] = None

        for number, line in enumerate(text.splitlines(), start=1):
            if fence is not None:
                if fence.closes_on(line):
                    stack[-1].fences.append(self._make_fence(fence, end_line=number))
                    fence = None
                else:
                    fence.add(line)
                continue

            opened = self._open_fence(line, number)
            if opened is not None:
                fence = opened
                continue

            heading = HEADING_RE.match(line)
            if heading:
                level = len(heading.group(1))
                title = CLOSING_HASHES_RE.sub("", heading.group(2) or "").strip()
                section = Section(level=level, title=title, line=number)
                while stack[-1].level >= level:
                    stack.pop()
                stack[-1].children.append(section)
                stack.append(section)
                continue

            if THEMATIC_BREAK_RE.match(line):
                continue

            bullet = BULLET_RE.match(line)
            if bullet:
                stack[-1].bullets.append(bullet.group(1).strip())

        if fence is not None:
            logger.debug("Fence opened on line %d is never closed", fence.line)
            stack[-1].fences.append(self._make_fence(fence, end_line=None))

        return MarkdownDocument(root=root, path=path)

    def _open_fence(self, line: str, number: int) -> Optional[_OpenFence]:
        match = FENCE_OPEN_RE.match(line)
        if not match:
            return None
        indent, marker, info = match.groups()
        # A backtick fence's info string may not contain backticks
        if marker[0] == "`" and "`" in info:
            return None
        return _OpenFence(len(indent), marker, info.strip(), number)

    def _make_fence(self, fence: _OpenFence, end_line: Optional[int]) -> CodeFence:
        code = "\n".join(fence.lines)
        if fence.lines:
            code += "\n"
        return CodeFence(
            info=fence.info,
            code=code,
            start_line=fence.line,
            end_line=end_line,
            python_languages=self.python_languages
        )
