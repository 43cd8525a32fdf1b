"""
Object-Oriented Design Principles Handbook

Runnable before/after examples for Tell-Don't-Ask, YAGNI and the SOLID
principles, a renderer that turns them into markdown, and a linter that
keeps handbook documents internally consistent.

Architecture:
    - oodesign/domain: Pure entities (principles, markdown model, lint model)
    - oodesign/examples: The illustrative before/after classes
    - oodesign/infrastructure: Configuration, logging, catalog and markdown I/O
    - oodesign/application: Use cases (render, lint, demonstrate)
    - oodesign/interfaces: CLI

Usage:
    from oodesign.application.renderer import HandbookRenderer
    from oodesign.application.linter import HandbookLinter

    markdown = HandbookRenderer().render_handbook()
    report = HandbookLinter().lint_text(markdown)
    assert not report.has_errors
"""

__version__ = "1.0.0"
