"""
Infrastructure Layer

Configuration, logging, and file access.
Contains the YAML principle catalog loader and the markdown parser.
"""

from oodesign.infrastructure.config import (
    AppConfig,
    LintConfig,
    RenderConfig,
    get_config,
    reload_config,
)
from oodesign.infrastructure.catalog_loader import (
    CatalogError,
    CatalogLoader,
    get_principle,
)
from oodesign.infrastructure.markdown_parser import MarkdownParser
