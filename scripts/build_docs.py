"""
Handbook Build Script

Renders the principle catalog into markdown and lints the result, so the
published docs never drift from the example code.

Usage:
    python scripts/build_docs.py
    python scripts/build_docs.py --output docs/principles.md
    python scripts/build_docs.py --split --output docs/principles
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from oodesign.application.linter import HandbookLinter
from oodesign.application.renderer import HandbookRenderer
from oodesign.infrastructure.config import get_config
from oodesign.infrastructure.logging_config import setup_logging


def main():
    config = get_config()

    parser = argparse.ArgumentParser(description="Render and lint the design principles handbook")
    parser.add_argument(
        "--output", "-o",
        default=str(config.docs_path / "principles.md"),
        help="Output file, or directory with --split (default: %(default)s)"
    )
    parser.add_argument("--split", action="store_true", help="One file per principle")
    args = parser.parse_args()

    setup_logging(config.log_level)

    print("=" * 60)
    print("Building handbook")
    print("=" * 60)

    written = HandbookRenderer().write(Path(args.output), split=args.split)
    for path in written:
        print(f"  [OK] {path}")

    reports = HandbookLinter().lint_paths(written)
    failed = [r for r in reports if not r.passed(config.lint.strict)]
    for report in reports:
        for issue in report.issues:
            print(f"  {issue.format()}")

    if failed:
        print(f"\n[ERROR] {len(failed)} file(s) failed lint")
        sys.exit(1)

    print(f"\n[OK] {len(written)} file(s) written and linted")


if __name__ == "__main__":
    main()
