#!/usr/bin/env python3
"""
FC Template Generator

Generate an Aliyun Function Compute template from a serverless spec (f.yml).

Usage:
    python -m spec_builder.main [options]

Options:
    --spec PATH             Spec file path (default: f.yml, or SPEC_PATH)
    --output PATH           Template output path (default: template.yml)
    --format yaml|json      Output format
    --validate              Validate the spec before building
    --reject-duplicates     Fail when a function declares a trigger family twice
    --dry-run               Print the template instead of writing it
    --verbose               Verbose output
"""

import argparse
import logging
import sys
from pathlib import Path

from .core.config import config
from .core.exceptions import SpecBuilderError
from .core.logging_config import setup_logging
from .fc.builder import REJECT, build_fc_template
from .parser import load_spec
from .renderer import FORMATS, render_template

logger = logging.getLogger("spec_builder.main")


def generate_template(
    spec_path: Path,
    output_path: Path,
    fmt: str = "yaml",
    validate: bool = False,
    duplicate_policy: str | None = None,
    dry_run: bool = False,
) -> dict:
    """
    Build the template for a spec file and write it out.

    Returns:
        The built template (before None stripping)
    """
    origin = load_spec(spec_path, validate=validate)
    template = build_fc_template(origin, duplicate_policy=duplicate_policy)
    content = render_template(template, fmt)

    if dry_run:
        print(f"\n[DryRun] Target: {output_path}")
        print("-" * 60)
        print(content.strip())
        print("-" * 60)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Generated {output_path}")

    return template


def main(argv: list | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate FC template from a serverless spec")
    parser.add_argument("--spec", default=config.SPEC_PATH, help="Spec file path")
    parser.add_argument(
        "--output", default=config.TEMPLATE_OUTPUT_PATH, help="Template output path"
    )
    parser.add_argument(
        "--format", choices=FORMATS, default=config.OUTPUT_FORMAT, help="Output format"
    )
    parser.add_argument("--validate", action="store_true", help="Validate the spec first")
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Fail when a function declares the same trigger family twice",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show the template without writing it"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    setup_logging(config.LOG_CONFIG_PATH, level="DEBUG" if args.verbose else config.LOG_LEVEL)

    try:
        generate_template(
            Path(args.spec),
            Path(args.output),
            fmt=args.format,
            validate=args.validate,
            duplicate_policy=REJECT if args.reject_duplicates else None,
            dry_run=args.dry_run,
        )
    except (SpecBuilderError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
