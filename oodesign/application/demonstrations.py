"""
Demonstrations

Runs the `demo()` function of an example module so the before/after
behavior can be compared side by side.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from oodesign.application.renderer import import_example
from oodesign.domain.models import ExampleSide, Principle
from oodesign.infrastructure.catalog_loader import CatalogError, CatalogLoader

logger = logging.getLogger(__name__)


@dataclass
class Demonstration:
    """Transcript of one example module's demo()."""
    principle_id: str
    side: ExampleSide
    module: str
    lines: list[str]

    def to_dict(self) -> dict:
        return {
            "principle": self.principle_id,
            "side": self.side.value,
            "module": self.module,
            "lines": list(self.lines)
        }


def run_demo(principle: Principle, side: ExampleSide) -> Demonstration:
    """
    Import the example module for one side and run its demo().

    Raises:
        CatalogError: If the module cannot be imported or has no demo()
    """
    ref = principle.example(side)
    module = import_example(ref)
    demo = getattr(module, "demo", None)
    if not callable(demo):
        raise CatalogError(f"{ref.module} has no demo() function")

    logger.debug("Running %s.demo()", ref.module)
    lines = [str(line) for line in demo()]
    return Demonstration(principle.id, side, ref.module, lines)


def run_all(loader: Optional[CatalogLoader] = None) -> Iterator[Demonstration]:
    """Before then after, for every principle in catalog order."""
    loader = loader or CatalogLoader()
    for principle in loader.load_all():
        for side in (ExampleSide.BEFORE, ExampleSide.AFTER):
            yield run_demo(principle, side)
