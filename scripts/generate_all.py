#!/usr/bin/env python3
"""Generate the site content corpus (docs pages + skills pages).

Exit codes: 0 = everything generated, 1 = at least one source skipped,
2 = docs mapping missing or invalid.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from swarm_docs.config import SiteConfig
from swarm_docs.pipeline.generate import SECTIONS, build_context, generate_all
from swarm_docs.pipeline.mapping import MappingError

REPO_ROOT = Path(__file__).resolve().parents[1]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python scripts/generate_all.py",
        description="Generate MDX pages for the docs site from docs/ and skills/.",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=REPO_ROOT,
        help="Corpus root holding docs/, skills/ and site/ (default: repo root)",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Output directory (default: <site>/<outputDir> from the docs mapping)",
    )
    parser.add_argument(
        "--only",
        choices=SECTIONS,
        default=None,
        help="Generate only one section",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = SiteConfig.from_root(args.project_root)

    try:
        ctx = build_context(config)
    except MappingError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print("=== Generating documentation site content ===")
    result = generate_all(ctx, args.out_dir, only=args.only)
    print(f"\n=== Done: {len(result.generated)} generated, {len(result.skipped)} skipped ===")

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
