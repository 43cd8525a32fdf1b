"""
Handbook Renderer

Builds the markdown handbook from catalog prose and the live source of the
example modules, so the published snippets are always the code that runs.
"""

import ast
import importlib
import inspect
import logging
import re
from pathlib import Path
from types import ModuleType
from typing import Optional

from oodesign.domain.models import ExampleRef, ExampleSide, Principle
from oodesign.infrastructure.catalog_loader import CatalogError, CatalogLoader
from oodesign.infrastructure.config import RenderConfig, get_config

logger = logging.getLogger(__name__)

GLOSSARY = (
    ("SOLID", "Five object-oriented design principles: SRP, OCP, LSP, ISP and DIP."),
    ("TDA", "Tell, Don't Ask. Invoke behavior on an object rather than read its "
            "state and act on it from outside."),
    ("YAGNI", "You Aren't Gonna Need It. A guideline against speculative generality."),
)


def anchor(heading: str) -> str:
    """GitHub-style anchor for a heading."""
    slug = re.sub(r"[^\w\- ]", "", heading.strip().lower())
    return slug.replace(" ", "-")


def import_example(ref: ExampleRef) -> ModuleType:
    try:
        return importlib.import_module(ref.module)
    except ImportError as e:
        raise CatalogError(f"Cannot import example module {ref.module}: {e}") from e


def example_source(ref: ExampleRef) -> str:
    """
    Source for a before/after block.

    The module's top-level imports come first so the snippet stands on its
    own, followed by each listed symbol in catalog order.
    """
    module = import_example(ref)
    module_source = inspect.getsource(module)

    imports = []
    for node in ast.parse(module_source).body:
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            imports.append(ast.get_source_segment(module_source, node))

    blocks = []
    for name in ref.symbols:
        obj = getattr(module, name, None)
        if obj is None:
            raise CatalogError(f"{ref.module} has no symbol {name!r}")
        try:
            blocks.append(inspect.getsource(obj).rstrip())
        except TypeError as e:
            raise CatalogError(f"{ref.module}.{name} is not a class or function") from e

    parts = []
    if imports:
        parts.append("\n".join(imports))
    parts.extend(blocks)
    return "\n\n\n".join(parts) + "\n"


class HandbookRenderer:
    """Render principles to markdown."""

    def __init__(self, loader: Optional[CatalogLoader] = None, config: Optional[RenderConfig] = None):
        self.loader = loader or CatalogLoader()
        self.config = config or get_config().render

    def render_principle(self, principle: Principle, level: int = 2) -> str:
        h = "#" * level
        sub = "#" * (level + 1)
        lines = [f"{h} {principle.heading}", "", principle.summary, "", f"{sub} Violations", ""]
        lines.extend(f"- {violation}" for violation in principle.violations)
        lines.append("")

        for side in (ExampleSide.BEFORE, ExampleSide.AFTER):
            ref = principle.example(side)
            lines.extend([f"{sub} {side.value.capitalize()}", ""])
            if ref.explanation:
                lines.extend([ref.explanation, ""])
            lines.extend(["```python", example_source(ref).rstrip("\n"), "```", ""])

        if principle.takeaways:
            lines.extend([f"{sub} Takeaways", ""])
            lines.extend(f"- {takeaway}" for takeaway in principle.takeaways)
            lines.append("")

        if principle.references:
            lines.extend([f"{sub} References", ""])
            lines.extend(f"- {reference}" for reference in principle.references)
            lines.append("")

        logger.debug("Rendered principle %s", principle.id)
        return "\n".join(lines)

    def render_toc(self, principles: list[Principle]) -> str:
        lines = ["## Contents", ""]
        for principle in principles:
            lines.append(f"- [{principle.heading}](#{anchor(principle.heading)})")
        if self.config.include_glossary:
            lines.append("- [Glossary](#glossary)")
        lines.append("")
        return "\n".join(lines)

    def render_glossary(self) -> str:
        lines = ["## Glossary", ""]
        lines.extend(f"- **{term}**: {meaning}" for term, meaning in GLOSSARY)
        lines.append("")
        return "\n".join(lines)

    def render_handbook(self, principles: Optional[list[Principle]] = None) -> str:
        if principles is None:
            principles = self.loader.load_all()

        parts = [f"# {self.config.title}\n"]
        if self.config.include_toc:
            parts.append(self.render_toc(principles))
        parts.extend(self.render_principle(p) for p in principles)
        if self.config.include_glossary:
            parts.append(self.render_glossary())
        return "\n".join(parts).rstrip("\n") + "\n"

    def write(self, output: Path, split: bool = False) -> list[Path]:
        """
        Write the handbook to disk.

        Args:
            output: Target file, or target directory when `split` is set
            split: One file per principle plus an index.md linking them

        Returns:
            Paths written, index last
        """
        output = Path(output)
        principles = self.loader.load_all()

        if not split:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(self.render_handbook(principles), encoding="utf-8")
            logger.info("Wrote handbook to %s", output)
            return [output]

        output.mkdir(parents=True, exist_ok=True)
        written = []
        index = [f"# {self.config.title}", ""]
        for principle in principles:
            path = output / f"{principle.id}.md"
            path.write_text(f"# {self.config.title}\n\n{self.render_principle(principle)}", encoding="utf-8")
            written.append(path)
            index.append(f"- [{principle.heading}]({path.name})")
        index.append("")
        if self.config.include_glossary:
            index.append(self.render_glossary())

        index_path = output / "index.md"
        index_path.write_text("\n".join(index).rstrip("\n") + "\n", encoding="utf-8")
        written.append(index_path)
        logger.info("Wrote %d files to %s", len(written), output)
        return written
