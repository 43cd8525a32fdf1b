"""
Handbook Linter

Checks that a handbook document is internally consistent:

- every fence is closed and every python fence parses
- every principle section has a Violations list, a Before example and an
  After example
- After examples only use names that the section defines, and their classes
  honor the interfaces the section introduces
"""

import ast
import logging
from pathlib import Path
from typing import Iterable, Optional

from oodesign.application.code_analysis import (
    ClassIndex,
    collect_classes,
    collect_names,
    interface_parameters,
    method_calls_on,
    undefined_names,
)
from oodesign.domain.models import (
    CodeFence,
    LintIssue,
    LintReport,
    MarkdownDocument,
    Section,
    Severity,
)
from oodesign.infrastructure.config import LintConfig, get_config
from oodesign.infrastructure.markdown_parser import MarkdownParser

logger = logging.getLogger(__name__)

RULES: dict[str, Severity] = {
    "unterminated-fence": Severity.ERROR,
    "syntax-error": Severity.ERROR,
    "missing-violations": Severity.ERROR,
    "missing-before": Severity.ERROR,
    "missing-after": Severity.ERROR,
    "undefined-name": Severity.ERROR,
    "unimplemented-interface-method": Severity.ERROR,
    "signature-mismatch": Severity.ERROR,
    "unknown-interface-method": Severity.ERROR,
    "empty-fence": Severity.WARNING,
    "unlabeled-fence": Severity.INFO,
}


class _Collector:
    """Adds issues to a report unless their rule is disabled."""

    def __init__(self, report: LintReport, disabled: set[str]):
        self.report = report
        self.disabled = disabled

    def emit(self, rule: str, message: str, line: int, section: Optional[Section] = None) -> None:
        if rule in self.disabled:
            return
        self.report.add(LintIssue(
            rule=rule,
            severity=RULES[rule],
            message=message,
            line=line,
            path=self.report.path,
            section=section.title if section else None
        ))


class HandbookLinter:
    """Lint markdown handbook documents."""

    def __init__(self, config: Optional[LintConfig] = None, parser: Optional[MarkdownParser] = None):
        self.config = config or get_config().lint
        unknown = sorted(set(self.config.disabled_rules) - set(RULES))
        if unknown:
            raise ValueError(f"Unknown lint rules: {', '.join(unknown)}")
        self.parser = parser or MarkdownParser(self.config.python_languages)
        self._trees: dict[int, Optional[ast.Module]] = {}

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def lint_text(self, text: str, path: Optional[str] = None) -> LintReport:
        return self.lint_document(self.parser.parse(text, path=path))

    def lint_file(self, path: Path) -> LintReport:
        return self.lint_document(self.parser.parse_file(Path(path)))

    def lint_paths(self, paths: Iterable[Path]) -> list[LintReport]:
        """Lint files and, recursively, every *.md file under directories."""
        reports = []
        for path in paths:
            path = Path(path)
            if path.is_dir():
                files = sorted(path.rglob("*.md"))
                if not files:
                    logger.warning("No markdown files under %s", path)
                reports.extend(self.lint_file(f) for f in files)
            else:
                reports.append(self.lint_file(path))
        return reports

    def lint_document(self, document: MarkdownDocument) -> LintReport:
        report = LintReport(path=document.path)
        out = _Collector(report, set(self.config.disabled_rules))
        self._trees = {}

        for fence in document.fences:
            self._check_fence(fence, out)

        for section in document.principle_sections():
            self._check_structure(section, out)
            self._check_after_code(section, out)

        report.sort()
        logger.info(
            "Linted %s: %d errors, %d warnings",
            document.path or "<text>", len(report.errors), len(report.warnings)
        )
        return report

    # -------------------------------------------------------------------------
    # Fences
    # -------------------------------------------------------------------------

    def _tree(self, fence: CodeFence) -> Optional[ast.Module]:
        """Parsed python fence, or None when it is not lintable python or does not parse."""
        key = id(fence)
        if key not in self._trees:
            tree = None
            if fence.is_python and not fence.skip_lint and not fence.is_empty:
                try:
                    tree = ast.parse(fence.code)
                except SyntaxError:
                    tree = None
            self._trees[key] = tree
        return self._trees[key]

    def _check_fence(self, fence: CodeFence, out: _Collector) -> None:
        if not fence.closed:
            out.emit("unterminated-fence", "Code fence is never closed", fence.start_line)
        if fence.is_empty:
            out.emit("empty-fence", "Code fence is empty", fence.start_line)
            return
        if not fence.language:
            out.emit("unlabeled-fence", "Code fence has no language", fence.start_line)
        if not fence.is_python or fence.skip_lint:
            return
        try:
            ast.parse(fence.code)
        except SyntaxError as e:
            line = fence.start_line + (e.lineno or 1)
            out.emit("syntax-error", f"Python fence does not parse: {e.msg}", line)

    # -------------------------------------------------------------------------
    # Principle sections
    # -------------------------------------------------------------------------

    def _check_structure(self, section: Section, out: _Collector) -> None:
        violations = section.subsection("violations")
        if violations is None:
            out.emit("missing-violations", f"'{section.title}' has no Violations subsection", section.line, section)
        elif not violations.bullets:
            out.emit("missing-violations", f"'{section.title}' lists no violations", violations.line, section)

        for kind, rule in (("before", "missing-before"), ("after", "missing-after")):
            sub = section.subsection(kind)
            if sub is None:
                out.emit(rule, f"'{section.title}' has no {kind.capitalize()} subsection", section.line, section)
            elif not any(f.is_python for f in sub.all_fences()):
                out.emit(rule, f"'{section.title}' {kind.capitalize()} has no python example", sub.line, section)

    def _check_after_code(self, section: Section, out: _Collector) -> None:
        after = section.subsection("after")
        if after is None:
            return

        scope = [(f, self._tree(f)) for f in section.all_fences()]
        scope = [(f, tree) for f, tree in scope if tree is not None]
        after_lines = {f.start_line for f in after.all_fences()}
        after_code = [(f, tree) for f, tree in scope if f.start_line in after_lines]
        if not after_code:
            return

        # Names
        usages = [collect_names(tree) for _, tree in scope]
        defined = set().union(*(u.defined for u in usages))
        if not any(u.star_import for u in usages):
            for fence, tree in after_code:
                for name, line in sorted(undefined_names(collect_names(tree), defined).items()):
                    out.emit("undefined-name", f"'{name}' is used but never defined", fence.start_line + line, section)

        # Interfaces
        index = ClassIndex(cls for f, tree in scope for cls in collect_classes(tree, f.start_line))
        interfaces = index.interfaces()
        for fence, tree in after_code:
            for cls in collect_classes(tree, fence.start_line):
                if index.is_interface(cls):
                    continue
                for name, (iface, _) in index.unimplemented(cls).items():
                    out.emit(
                        "unimplemented-interface-method",
                        f"{cls.name} does not implement {iface.name}.{name}()",
                        cls.line, section
                    )
                for name, iface, actual, expected in index.signature_conflicts(cls):
                    out.emit(
                        "signature-mismatch",
                        f"{cls.name}.{name}() takes {actual.describe()} arguments, "
                        f"{iface.name}.{name}() takes {expected.describe()}",
                        fence.start_line + cls.methods[name].lineno, section
                    )

            for func, param, iface in interface_parameters(tree, interfaces):
                if index.has_unknown_bases(iface):
                    continue
                members = index.members(iface)
                for method, line in method_calls_on(func, param):
                    if method not in members and not method.startswith("__"):
                        out.emit(
                            "unknown-interface-method",
                            f"{func.name}() calls {param}.{method}() but {iface.name} declares no {method}",
                            fence.start_line + line, section
                        )
