"""
Configuration Module

Centralized configuration management for the handbook tools.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_PATH = PACKAGE_ROOT / "catalog"
DEFAULT_PYTHON_LANGUAGES = ("python", "py", "python3")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class LintConfig:
    """Linter configuration."""
    disabled_rules: list[str] = field(default_factory=list)
    strict: bool = False
    python_languages: tuple[str, ...] = DEFAULT_PYTHON_LANGUAGES

    @classmethod
    def from_env(cls) -> "LintConfig":
        languages = _env_list("LINT_PYTHON_LANGUAGES") or list(DEFAULT_PYTHON_LANGUAGES)
        return cls(
            disabled_rules=_env_list("LINT_DISABLE"),
            strict=_env_flag("LINT_STRICT", "false"),
            python_languages=tuple(lang.lower() for lang in languages)
        )


@dataclass
class RenderConfig:
    """Markdown rendering configuration."""
    title: str = "Object-Oriented Design Principles"
    include_toc: bool = True
    include_glossary: bool = True

    @classmethod
    def from_env(cls) -> "RenderConfig":
        return cls(
            title=os.getenv("HANDBOOK_TITLE", "Object-Oriented Design Principles"),
            include_toc=_env_flag("RENDER_TOC", "true"),
            include_glossary=_env_flag("RENDER_GLOSSARY", "true")
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = False
    log_level: str = "WARNING"

    # Sub-configurations
    lint: LintConfig = field(default_factory=LintConfig.from_env)
    render: RenderConfig = field(default_factory=RenderConfig.from_env)

    # Paths
    catalog_path: Path = field(default_factory=lambda: DEFAULT_CATALOG_PATH)
    docs_path: Path = field(default_factory=lambda: Path("docs"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        debug = _env_flag("DEBUG", "false")
        return cls(
            debug=debug,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if debug else "WARNING").upper(),
            lint=LintConfig.from_env(),
            render=RenderConfig.from_env(),
            catalog_path=Path(os.getenv("CATALOG_PATH") or DEFAULT_CATALOG_PATH),
            docs_path=Path(os.getenv("DOCS_PATH", "docs"))
        )

    def to_dict(self) -> dict:
        return {
            "debug": self.debug,
            "log_level": self.log_level,
            "catalog_path": str(self.catalog_path),
            "docs_path": str(self.docs_path),
            "lint": {
                "disabled_rules": list(self.lint.disabled_rules),
                "strict": self.lint.strict,
                "python_languages": list(self.lint.python_languages)
            },
            "render": {
                "title": self.render.title,
                "include_toc": self.render.include_toc,
                "include_glossary": self.render.include_glossary
            }
        }


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config
