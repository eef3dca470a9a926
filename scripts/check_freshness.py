#!/usr/bin/env python3
"""Check that the published site content matches what the sources generate.

Exit codes: 0 = up to date, 1 = stale, missing or skipped files,
2 = docs mapping missing or invalid.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from swarm_docs.config import SiteConfig
from swarm_docs.pipeline.freshness import check_freshness
from swarm_docs.pipeline.mapping import MappingError
from swarm_docs.util.stable_json import write_json

REPO_ROOT = Path(__file__).resolve().parents[1]

REGENERATE_HINT = 'Run "python scripts/generate_all.py" to regenerate.'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python scripts/check_freshness.py",
        description=(
            "Regenerate the site content into a temp directory and compare it with the "
            "published content. Exit codes: 0=fresh, 1=stale/missing/skipped, 2=error."
        ),
    )
    parser.add_argument("--project-root", type=Path, default=REPO_ROOT)
    parser.add_argument(
        "--published-dir",
        type=Path,
        default=None,
        help="Published content dir (default: site/src/content/docs)",
    )
    parser.add_argument("--out", type=Path, default=None, help="Optional JSON report path")
    return parser


def _print_list(header: str, items: list[str]) -> None:
    if not items:
        return
    print(header, file=sys.stderr)
    for item in items:
        print(f"  - {item}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = SiteConfig.from_root(args.project_root)

    try:
        report = check_freshness(config, published_dir=args.published_dir)
    except MappingError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.out is not None:
        write_json(args.out, report.to_dict())

    if report.ok:
        print(f"All {len(report.generated)} generated files are up-to-date.")
        return 0

    _print_list("STALE files (content differs from source):", report.stale_paths)
    _print_list("MISSING files (not yet generated):", report.missing)
    _print_list("SKIPPED sources (not found or unreadable):", report.skipped)
    print(f"\n{REGENERATE_HINT}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
