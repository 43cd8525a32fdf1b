"""
CLI Interface

Command-line interface for the design principles handbook.
Lists principles, renders the handbook, lints markdown and runs demos.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from oodesign.application.demonstrations import run_demo
from oodesign.application.linter import RULES, HandbookLinter
from oodesign.application.renderer import HandbookRenderer
from oodesign.domain.models import ExampleSide
from oodesign.infrastructure.catalog_loader import CatalogError, CatalogLoader
from oodesign.infrastructure.config import AppConfig, reload_config
from oodesign.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LINT_FAILED = 1
EXIT_ERROR = 2


def print_header(title: str) -> None:
    """Print formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_section(title: str) -> None:
    """Print formatted section header."""
    print(f"\n--- {title} ---")


# =============================================================================
# Commands
# =============================================================================

def cmd_list(config: AppConfig, args: argparse.Namespace) -> int:
    """Print a table of the catalog."""
    principles = CatalogLoader(config.catalog_path).load_all()
    print_header("DESIGN PRINCIPLES")
    for p in principles:
        print(f"  {p.id:<8} {p.acronym:<6} {p.title} ({p.family.value})")
    print()
    return EXIT_OK


def cmd_show(config: AppConfig, args: argparse.Namespace) -> int:
    """Render a single principle to stdout."""
    loader = CatalogLoader(config.catalog_path)
    renderer = HandbookRenderer(loader, config.render)
    print(renderer.render_principle(loader.load(args.principle)), end="")
    return EXIT_OK


def cmd_render(config: AppConfig, args: argparse.Namespace) -> int:
    """Render the whole handbook to stdout, a file, or a directory."""
    config.render.include_toc = config.render.include_toc and not args.no_toc
    config.render.include_glossary = config.render.include_glossary and not args.no_glossary
    renderer = HandbookRenderer(CatalogLoader(config.catalog_path), config.render)

    if args.output is None:
        if args.split:
            raise ValueError("--split requires --output DIR")
        print(renderer.render_handbook(), end="")
        return EXIT_OK

    for path in renderer.write(Path(args.output), split=args.split):
        print(f"  wrote {path}")
    return EXIT_OK


def cmd_lint(config: AppConfig, args: argparse.Namespace) -> int:
    """Lint markdown files; exit 1 when any report fails."""
    lint_config = config.lint
    lint_config.disabled_rules = sorted(set(lint_config.disabled_rules) | set(args.disable or []))
    lint_config.strict = lint_config.strict or args.strict

    linter = HandbookLinter(lint_config)
    reports = linter.lint_paths(Path(p) for p in args.paths)
    passed = all(r.passed(lint_config.strict) for r in reports)

    if args.format == "json":
        print(json.dumps({"passed": passed, "reports": [r.to_dict() for r in reports]}, indent=2))
    else:
        for report in reports:
            for issue in report.issues:
                print(issue.format())
        errors = sum(len(r.errors) for r in reports)
        warnings = sum(len(r.warnings) for r in reports)
        status = "OK" if passed else "FAILED"
        print(f"[{status}] {len(reports)} file(s), {errors} error(s), {warnings} warning(s)")

    return EXIT_OK if passed else EXIT_LINT_FAILED


def cmd_demo(config: AppConfig, args: argparse.Namespace) -> int:
    """Run before/after demos for one principle."""
    principle = CatalogLoader(config.catalog_path).load(args.principle)
    sides = [ExampleSide(args.side)] if args.side != "both" else [ExampleSide.BEFORE, ExampleSide.AFTER]

    print_header(f"{principle.acronym}: {principle.title}")
    for side in sides:
        demo = run_demo(principle, side)
        print_section(f"{side.value.upper()} ({demo.module})")
        for line in demo.lines:
            print(f"  {line}")
    print()
    return EXIT_OK


def cmd_status(config: AppConfig, args: argparse.Namespace) -> int:
    """Display the effective configuration."""
    print_header("CONFIGURATION")
    print(json.dumps(config.to_dict(), indent=2))
    print_section("Lint rules")
    for rule, severity in RULES.items():
        marker = " " if rule not in config.lint.disabled_rules else "x"
        print(f"  [{marker}] {rule} ({severity.value})")
    print()
    return EXIT_OK


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "render": cmd_render,
    "lint": cmd_lint,
    "demo": cmd_demo,
    "status": cmd_status,
}


# =============================================================================
# Entry point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oodesign",
        description="Object-oriented design principles handbook - examples, renderer and linter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the principles in the catalog
  oodesign list

  # Render the handbook into docs/
  oodesign render -o docs/principles.md

  # Lint hand-written docs
  oodesign lint docs/ --strict

  # Compare before/after behavior
  oodesign demo lsp
        """
    )
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    parser.add_argument("--catalog", metavar="DIR", help="Principle catalog directory")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("list", help="List principles")

    show = sub.add_parser("show", help="Render one principle")
    show.add_argument("principle", help="Principle id, e.g. srp")

    render = sub.add_parser("render", help="Render the handbook")
    render.add_argument("--output", "-o", help="Output file, or directory with --split")
    render.add_argument("--split", action="store_true", help="One file per principle plus index.md")
    render.add_argument("--no-toc", action="store_true", help="Omit the table of contents")
    render.add_argument("--no-glossary", action="store_true", help="Omit the glossary")

    lint = sub.add_parser("lint", help="Lint markdown files or directories")
    lint.add_argument("paths", nargs="+", help="Markdown files or directories")
    lint.add_argument("--format", "-f", choices=("text", "json"), default="text")
    lint.add_argument("--strict", action="store_true", help="Fail on warnings too")
    lint.add_argument("--disable", "-d", action="append", metavar="RULE", help="Disable a rule (repeatable)")

    demo = sub.add_parser("demo", help="Run before/after demos")
    demo.add_argument("principle", help="Principle id, e.g. dip")
    demo.add_argument("--side", choices=("before", "after", "both"), default="both")

    sub.add_parser("status", help="Show effective configuration")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = reload_config()
    if args.catalog:
        config.catalog_path = Path(args.catalog)
    setup_logging(args.log_level or config.log_level)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    try:
        return COMMANDS[args.command](config, args)
    except (CatalogError, FileNotFoundError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
