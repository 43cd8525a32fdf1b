"""
Domain Models

Pure entities with no framework dependencies.
Covers the principle catalog, the parsed markdown document and lint results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================

class PrincipleFamily(Enum):
    """Where a principle comes from."""
    SOLID = "solid"
    GUIDELINE = "guideline"


class Severity(Enum):
    """Severity of a lint issue."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return {"error": 0, "warning": 1, "info": 2}[self.value]


class ExampleSide(Enum):
    """Which half of a before/after pair."""
    BEFORE = "before"
    AFTER = "after"


# =============================================================================
# PRINCIPLE CATALOG
# =============================================================================

@dataclass(frozen=True)
class ExampleRef:
    """
    Reference to example code living in an importable module.

    NOTE: The source shown in the docs is read from `module`, never copied
    into the catalog.
    """
    module: str
    symbols: tuple[str, ...]
    explanation: str = ""

    def __post_init__(self):
        if not self.module or not self.module.strip():
            raise ValueError("Example module cannot be empty")
        if not self.symbols:
            raise ValueError(f"Example {self.module} must name at least one symbol")


@dataclass(frozen=True)
class Principle:
    """A design principle with its violation list and before/after pair."""
    id: str
    acronym: str
    title: str
    family: PrincipleFamily
    order: int
    summary: str
    violations: tuple[str, ...]
    before: ExampleRef
    after: ExampleRef
    takeaways: tuple[str, ...] = ()
    references: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.violations:
            raise ValueError(f"Principle {self.id} must list at least one violation")
        if self.before.module == self.after.module:
            raise ValueError(f"Principle {self.id}: before and after share module {self.before.module}")

    @property
    def heading(self) -> str:
        return f"{self.acronym}: {self.title}"

    def example(self, side: ExampleSide) -> ExampleRef:
        return self.before if side is ExampleSide.BEFORE else self.after


# =============================================================================
# MARKDOWN MODEL
# =============================================================================

PRINCIPLE_SUBSECTIONS = ("violations", "before", "after")


@dataclass
class CodeFence:
    """A fenced code block."""
    info: str
    code: str
    start_line: int
    end_line: Optional[int] = None
    python_languages: frozenset[str] = frozenset({"python", "py", "python3"})

    @property
    def language(self) -> str:
        parts = self.info.split()
        return parts[0].lower() if parts else ""

    @property
    def closed(self) -> bool:
        return self.end_line is not None

    @property
    def is_python(self) -> bool:
        return self.language in self.python_languages

    @property
    def skip_lint(self) -> bool:
        return "no-lint" in self.info.split()[1:]

    @property
    def is_empty(self) -> bool:
        return not self.code.strip()


@dataclass
class Section:
    """A heading and everything up to the next heading of the same or higher level."""
    level: int
    title: str
    line: int
    fences: list[CodeFence] = field(default_factory=list)
    bullets: list[str] = field(default_factory=list)
    children: list["Section"] = field(default_factory=list)

    @property
    def kind(self) -> str:
        """First word of the title, lowercased and without trailing punctuation."""
        words = self.title.split()
        return words[0].rstrip(":.").lower() if words else ""

    def subsection(self, kind: str) -> Optional["Section"]:
        for child in self.children:
            if child.kind == kind:
                return child
        return None

    def all_fences(self) -> list[CodeFence]:
        """Fences in this section and all nested subsections, in document order."""
        fences = list(self.fences)
        for child in self.children:
            fences.extend(child.all_fences())
        return sorted(fences, key=lambda f: f.start_line)

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()

    def is_principle_section(self) -> bool:
        if self.level != 2:
            return False
        return any(child.kind in PRINCIPLE_SUBSECTIONS for child in self.children)


@dataclass
class MarkdownDocument:
    """Parsed markdown: a synthetic level-0 root holding the heading tree."""
    root: Section
    path: Optional[str] = None

    @property
    def sections(self) -> list[Section]:
        return self.root.children

    @property
    def fences(self) -> list[CodeFence]:
        return self.root.all_fences()

    def principle_sections(self) -> list[Section]:
        return [s for s in self.root.walk() if s.is_principle_section()]

    def find(self, title: str) -> Optional[Section]:
        for section in self.root.walk():
            if section.level and section.title == title:
                return section
        return None


# =============================================================================
# LINT RESULTS
# =============================================================================

@dataclass(frozen=True)
class LintIssue:
    """A single finding reported by the linter."""
    rule: str
    severity: Severity
    message: str
    line: int
    path: Optional[str] = None
    section: Optional[str] = None

    def sort_key(self) -> tuple:
        return (self.path or "", self.line, self.severity.rank, self.rule)

    def format(self) -> str:
        location = f"{self.path or '<text>'}:{self.line}"
        return f"{location}: {self.severity.value}: [{self.rule}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "path": self.path,
            "section": self.section
        }


@dataclass
class LintReport:
    """All issues found in one document."""
    path: Optional[str] = None
    issues: list[LintIssue] = field(default_factory=list)

    def add(self, issue: LintIssue) -> None:
        self.issues.append(issue)

    def sort(self) -> None:
        self.issues.sort(key=LintIssue.sort_key)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def passed(self, strict: bool = False) -> bool:
        """Errors always fail; strict mode fails on warnings too."""
        if self.has_errors:
            return False
        return not (strict and self.warnings)

    def rules(self) -> set[str]:
        return {i.rule for i in self.issues}

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "issues": [i.to_dict() for i in self.issues]
        }
