"""Detect drift between the sources and the published content corpus.

The full generation runs into a temporary directory, then every generated file
is compared byte for byte with its published counterpart:

- missing: generated, but absent from the published corpus
- stale: present, but with different content

The temporary directory is removed whether or not generation succeeds.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from swarm_docs.config import SiteConfig
from swarm_docs.corpus.sources import SourceEnumerator
from swarm_docs.model import DocsMapping
from swarm_docs.pipeline.generate import build_context, generate_all
from swarm_docs.util.hash_utils import sha256_file


@dataclass(frozen=True, slots=True)
class StaleFile:
    path: str
    expected_sha256: str  # published
    actual_sha256: str  # regenerated


@dataclass(slots=True)
class FreshnessReport:
    generated: list[str] = field(default_factory=list)
    stale: list[StaleFile] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def stale_paths(self) -> list[str]:
        return [s.path for s in self.stale]

    @property
    def ok(self) -> bool:
        return not (self.stale or self.missing or self.skipped)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "PASS" if self.ok else "FAIL",
            "generated": len(self.generated),
            "stale": [
                {
                    "path": s.path,
                    "expected_sha256": s.expected_sha256,
                    "actual_sha256": s.actual_sha256,
                }
                for s in self.stale
            ],
            "missing": list(self.missing),
            "skipped": list(self.skipped),
        }


def compare_trees(generated: list[str], *, fresh_dir: Path, published_dir: Path) -> FreshnessReport:
    report = FreshnessReport(generated=list(generated))
    for rel in generated:
        published_path = published_dir / rel
        if not published_path.is_file():
            report.missing.append(rel)
            continue

        fresh_path = fresh_dir / rel
        if fresh_path.read_bytes() != published_path.read_bytes():
            report.stale.append(
                StaleFile(
                    path=rel,
                    expected_sha256=sha256_file(published_path),
                    actual_sha256=sha256_file(fresh_path),
                )
            )
    return report


def check_freshness(
    config: SiteConfig,
    *,
    published_dir: Path | None = None,
    enumerator: SourceEnumerator | None = None,
    mapping: DocsMapping | None = None,
) -> FreshnessReport:
    """Regenerate into a temporary directory and diff against ``published_dir``.

    Raises MappingError when the docs mapping cannot be loaded.
    """

    ctx = build_context(config, enumerator=enumerator, mapping=mapping)
    published = Path(published_dir) if published_dir is not None else ctx.default_out_dir

    with tempfile.TemporaryDirectory(prefix="docs-freshness-") as tmp:
        fresh_dir = Path(tmp)
        print(f"Generating to temp directory: {fresh_dir}")
        result = generate_all(ctx, fresh_dir)
        report = compare_trees(result.generated, fresh_dir=fresh_dir, published_dir=published)

    report.skipped.extend(result.skipped)
    return report
