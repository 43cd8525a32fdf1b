"""
Unit tests for domain models.
"""

import pytest

from oodesign.domain.models import (
    CodeFence,
    ExampleRef,
    ExampleSide,
    LintIssue,
    LintReport,
    Principle,
    PrincipleFamily,
    Section,
    Severity,
)


def make_principle(**overrides):
    fields = dict(
        id="srp",
        acronym="SRP",
        title="Single Responsibility Principle",
        family=PrincipleFamily.SOLID,
        order=3,
        summary="One reason to change.",
        violations=("Does too much.",),
        before=ExampleRef("pkg.before", ("A",)),
        after=ExampleRef("pkg.after", ("B",)),
    )
    fields.update(overrides)
    return Principle(**fields)


class TestPrinciple:
    """Test principle invariants."""

    def test_heading(self):
        assert make_principle().heading == "SRP: Single Responsibility Principle"

    def test_example_by_side(self):
        principle = make_principle()

        assert principle.example(ExampleSide.BEFORE).module == "pkg.before"
        assert principle.example(ExampleSide.AFTER).module == "pkg.after"

    def test_requires_violations(self):
        with pytest.raises(ValueError, match="violation"):
            make_principle(violations=())

    def test_before_and_after_must_differ(self):
        with pytest.raises(ValueError, match="share module"):
            make_principle(after=ExampleRef("pkg.before", ("B",)))

    def test_example_ref_requires_symbols(self):
        with pytest.raises(ValueError):
            ExampleRef("pkg.before", ())

    def test_example_ref_requires_module(self):
        with pytest.raises(ValueError):
            ExampleRef("  ", ("A",))


class TestCodeFence:
    """Test fence properties."""

    def test_language_and_python(self):
        fence = CodeFence(info="Python title=x", code="x = 1\n", start_line=3, end_line=5)

        assert fence.language == "python"
        assert fence.is_python
        assert fence.closed
        assert not fence.skip_lint

    def test_unterminated(self):
        assert not CodeFence(info="py", code="", start_line=1).closed

    def test_no_lint_flag(self):
        assert CodeFence(info="python no-lint", code="x", start_line=1, end_line=2).skip_lint
        # The flag is only recognised after the language
        assert not CodeFence(info="no-lint", code="x", start_line=1, end_line=2).skip_lint

    def test_other_languages(self):
        fence = CodeFence(info="java", code="class A {}", start_line=1, end_line=3)

        assert fence.language == "java"
        assert not fence.is_python

    def test_empty(self):
        assert CodeFence(info="", code="  \n", start_line=1, end_line=3).is_empty


class TestSection:
    """Test section helpers."""

    def test_kind_strips_punctuation(self):
        assert Section(level=3, title="Before: god class", line=1).kind == "before"
        assert Section(level=3, title="Violations", line=1).kind == "violations"

    def test_principle_section_detection(self):
        section = Section(level=2, title="SRP", line=1)
        assert not section.is_principle_section()

        section.children.append(Section(level=3, title="After", line=5))
        assert section.is_principle_section()
        assert section.subsection("after") is section.children[0]
        assert section.subsection("before") is None

    def test_only_level_two_sections_are_principles(self):
        section = Section(level=3, title="SRP", line=1, children=[Section(level=4, title="Before", line=2)])

        assert not section.is_principle_section()

    def test_all_fences_in_document_order(self):
        child = Section(level=3, title="After", line=10, fences=[CodeFence("py", "b", 11, 13)])
        section = Section(level=2, title="X", line=1, fences=[CodeFence("py", "a", 3, 5)], children=[child])

        assert [f.code for f in section.all_fences()] == ["a", "b"]


class TestLintReport:
    """Test report aggregation."""

    def issue(self, severity, line=1, rule="rule"):
        return LintIssue(rule=rule, severity=severity, message="m", line=line, path="doc.md")

    def test_empty_report_passes(self):
        report = LintReport(path="doc.md")

        assert report.passed()
        assert report.passed(strict=True)

    def test_errors_fail(self):
        report = LintReport(issues=[self.issue(Severity.ERROR)])

        assert report.has_errors
        assert not report.passed()

    def test_warnings_fail_only_in_strict_mode(self):
        report = LintReport(issues=[self.issue(Severity.WARNING), self.issue(Severity.INFO)])

        assert report.passed()
        assert not report.passed(strict=True)

    def test_sort_by_line_then_severity(self):
        report = LintReport(issues=[
            self.issue(Severity.INFO, line=4),
            self.issue(Severity.WARNING, line=2),
            self.issue(Severity.ERROR, line=4),
        ])
        report.sort()

        assert [(i.line, i.severity) for i in report.issues] == [
            (2, Severity.WARNING), (4, Severity.ERROR), (4, Severity.INFO)
        ]

    def test_format_and_dict(self):
        issue = self.issue(Severity.ERROR, line=7, rule="syntax-error")

        assert issue.format() == "doc.md:7: error: [syntax-error] m"
        assert LintReport(path="doc.md", issues=[issue]).to_dict()["errors"] == 1
