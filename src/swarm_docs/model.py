from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Normalized, corpus-root-relative POSIX path ("skills/foo/SKILL.md").
DocumentIdentifier = str


class SourceKind(str, Enum):
    NARRATIVE = "narrative"
    SKILL = "skill"
    WORKFLOW_EXAMPLE = "workflow-example"


@dataclass(frozen=True, slots=True)
class SourceDocument:
    identifier: DocumentIdentifier
    kind: SourceKind
    text: str


@dataclass(frozen=True, slots=True)
class PageMetadata:
    title: str
    description: str | None = None
    sidebar_label: str | None = None


@dataclass(frozen=True, slots=True)
class GeneratedPage:
    output_path: str  # relative to the output dir, e.g. "skills/messaging.mdx"
    content: str


@dataclass(slots=True)
class GenerationResult:
    """Per-run outcome: output paths written, source identifiers skipped."""

    generated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def __add__(self, other: GenerationResult) -> GenerationResult:
        return GenerationResult(
            generated=[*self.generated, *other.generated],
            skipped=[*self.skipped, *other.skipped],
        )

    @property
    def ok(self) -> bool:
        return not self.skipped


@dataclass(frozen=True, slots=True)
class MappingPage:
    source: DocumentIdentifier
    output: str
    title: str | None = None
    description: str | None = None
    sidebar_label: str | None = None


@dataclass(frozen=True, slots=True)
class DocsMapping:
    output_dir: str
    pages: tuple[MappingPage, ...]
