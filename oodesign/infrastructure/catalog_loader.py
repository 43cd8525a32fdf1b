"""
Principle Catalog Loader

Loads principle descriptions from YAML files, one file per principle.
All prose lives in data files; example code lives in importable modules.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Dict, List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from oodesign.domain.models import ExampleRef, Principle, PrincipleFamily
from oodesign.infrastructure.config import get_config

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")
MODULE_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class CatalogError(ValueError):
    """Raised when a catalog file is malformed or inconsistent."""


# =============================================================================
# FILE SCHEMA
# =============================================================================

class ExampleSchema(BaseModel):
    """The `before` / `after` block of a catalog file."""
    module: str = Field(..., description="Dotted import path of the example module")
    symbols: List[str] = Field(..., min_length=1, description="Top-level names shown in the docs")
    explanation: str = Field("", description="Prose shown above the code")

    @field_validator("module")
    @classmethod
    def validate_module(cls, v: str) -> str:
        if not MODULE_PATTERN.match(v):
            raise ValueError(f"Invalid module path: {v!r}")
        return v

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: List[str]) -> List[str]:
        for name in v:
            if not name.isidentifier():
                raise ValueError(f"Invalid symbol name: {name!r}")
        if len(set(v)) != len(v):
            raise ValueError("Symbols must be unique")
        return v


class PrincipleSchema(BaseModel):
    """One catalog file."""
    id: str
    acronym: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    family: PrincipleFamily
    order: int = Field(..., ge=0)
    summary: str = Field(..., min_length=1)
    violations: List[str] = Field(..., min_length=1)
    before: ExampleSchema
    after: ExampleSchema
    takeaways: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not ID_PATTERN.match(v):
            raise ValueError(f"Invalid principle id: {v!r}")
        return v

    @model_validator(mode="after")
    def check_distinct_modules(self) -> "PrincipleSchema":
        if self.before.module == self.after.module:
            raise ValueError("before and after must use different modules")
        return self

    def to_domain(self) -> Principle:
        return Principle(
            id=self.id,
            acronym=self.acronym,
            title=self.title,
            family=self.family,
            order=self.order,
            summary=self.summary.strip(),
            violations=tuple(v.strip() for v in self.violations),
            before=ExampleRef(self.before.module, tuple(self.before.symbols), self.before.explanation.strip()),
            after=ExampleRef(self.after.module, tuple(self.after.symbols), self.after.explanation.strip()),
            takeaways=tuple(t.strip() for t in self.takeaways),
            references=tuple(r.strip() for r in self.references)
        )


def load_principle_file(file_path: Path) -> Principle:
    """Parse and validate a single catalog file."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"{file_path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"{file_path}: expected a mapping at the top level")

    try:
        principle = PrincipleSchema.model_validate(data).to_domain()
    except ValidationError as e:
        raise CatalogError(f"{file_path}: {e}") from e

    if principle.id != file_path.stem:
        raise CatalogError(f"{file_path}: id {principle.id!r} does not match file name")
    return principle


# =============================================================================
# LOADER
# =============================================================================

class CatalogLoader:
    """
    Loader for principle catalog files.

    Manages loading and caching of principles.
    """

    def __init__(self, catalog_dir: Optional[Path] = None):
        self.catalog_dir = Path(catalog_dir) if catalog_dir else get_config().catalog_path
        self._cache: Dict[str, Principle] = {}

    def ids(self) -> List[str]:
        """Principle ids available on disk, sorted alphabetically."""
        if not self.catalog_dir.is_dir():
            raise FileNotFoundError(f"Catalog directory not found: {self.catalog_dir}")
        return sorted(p.stem for p in self.catalog_dir.glob("*.yaml"))

    def load(self, principle_id: str) -> Principle:
        """
        Load one principle.

        Raises:
            FileNotFoundError: If no catalog file exists for the id
            CatalogError: If the file is malformed
        """
        if principle_id in self._cache:
            return self._cache[principle_id]

        file_path = self.catalog_dir / f"{principle_id}.yaml"
        if not file_path.exists():
            raise FileNotFoundError(f"Principle not found: {file_path}")

        principle = load_principle_file(file_path)
        logger.debug("Loaded principle %s from %s", principle.id, file_path)

        self._cache[principle_id] = principle
        return principle

    def load_all(self) -> List[Principle]:
        """Load every principle, ordered by `order` then id."""
        principles = [self.load(principle_id) for principle_id in self.ids()]

        seen_orders: Dict[int, str] = {}
        for principle in principles:
            other = seen_orders.get(principle.order)
            if other is not None:
                raise CatalogError(
                    f"Principles {other!r} and {principle.id!r} share order {principle.order}"
                )
            seen_orders[principle.order] = principle.id

        logger.info("Loaded %d principles from %s", len(principles), self.catalog_dir)
        return sorted(principles, key=lambda p: (p.order, p.id))

    def clear_cache(self) -> None:
        """Clear the principle cache."""
        self._cache.clear()


# Singleton loader instance
_loader: Optional[CatalogLoader] = None


def get_principle(principle_id: str) -> Principle:
    """Get a principle from the default catalog."""
    global _loader
    if _loader is None:
        _loader = CatalogLoader()
    return _loader.load(principle_id)
