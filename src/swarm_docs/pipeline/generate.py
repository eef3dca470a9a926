"""Generate the site content corpus from docs, skills and the workflow example.

Every run builds one link map from the docs mapping and the enumerated skills
and shares it across all pages. Sources that are missing or unreadable are
reported as skipped; the rest of the run continues.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from swarm_docs.config import SiteConfig
from swarm_docs.corpus.identifiers import normalize_identifier
from swarm_docs.corpus.link_map import LinkMap, build_link_map
from swarm_docs.corpus.link_rewriter import LinkDiagnostic
from swarm_docs.corpus.sources import FilesystemSourceEnumerator, SourceEnumerator
from swarm_docs.model import (
    DocsMapping,
    GenerationResult,
    PageMetadata,
    SourceDocument,
    SourceKind,
)
from swarm_docs.pages.emitter import emit_page, prepare_body, write_page
from swarm_docs.pages.metadata import (
    metadata_from_mapping,
    parse_skill_header,
    skill_metadata,
    workflow_metadata,
)
from swarm_docs.pipeline.mapping import load_docs_mapping

SECTIONS = ("docs", "skills")


@dataclass(frozen=True, slots=True)
class GenerationContext:
    config: SiteConfig
    mapping: DocsMapping
    enumerator: SourceEnumerator
    skill_slugs: tuple[str, ...]
    link_map: LinkMap

    @property
    def default_out_dir(self) -> Path:
        return self.config.output_dir(self.mapping)


def build_context(
    config: SiteConfig,
    *,
    enumerator: SourceEnumerator | None = None,
    mapping: DocsMapping | None = None,
) -> GenerationContext:
    """Load the mapping (raises MappingError) and build the run's link map."""

    if mapping is None:
        mapping = load_docs_mapping(config.mapping_path)
    if enumerator is None:
        enumerator = FilesystemSourceEnumerator(
            config.project_root,
            skills_dir_name=config.skills_dir_name,
            skill_filename=config.skill_filename,
        )
    skill_slugs = tuple(enumerator.skill_slugs())
    link_map = build_link_map(mapping.pages, skill_slugs, config=config)
    return GenerationContext(
        config=config,
        mapping=mapping,
        enumerator=enumerator,
        skill_slugs=skill_slugs,
        link_map=link_map,
    )


def _read_source(
    ctx: GenerationContext,
    identifier: str,
    kind: SourceKind,
    result: GenerationResult,
) -> SourceDocument | None:
    if not ctx.enumerator.exists(identifier):
        print(f"  SKIP: {identifier} (not found)", file=sys.stderr)
        result.skipped.append(identifier)
        return None
    try:
        text = ctx.enumerator.read_text(identifier)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"  SKIP: {identifier} (unreadable: {exc.__class__.__name__})", file=sys.stderr)
        result.skipped.append(identifier)
        return None
    return SourceDocument(identifier=identifier, kind=kind, text=text)


def _emit(
    ctx: GenerationContext,
    document: SourceDocument,
    metadata: PageMetadata,
    output: str,
    out_dir: Path,
    result: GenerationResult,
) -> None:
    diagnostics: list[LinkDiagnostic] = []
    page = emit_page(document, metadata, ctx.link_map, output, diagnostics=diagnostics)
    for d in diagnostics:
        if d.kind == "ambiguous":
            print(
                f"WARN: {d.source}: link {d.target!r} matched several pages "
                f"by filename, using {d.candidates[0]} (also: {', '.join(d.candidates[1:])})",
                file=sys.stderr,
            )
        else:
            print(
                f"WARN: {d.source}: link {d.target!r} could not be resolved, left unchanged",
                file=sys.stderr,
            )
    write_page(page, out_dir)
    print(f"  OK: {output}")
    result.generated.append(output)


def generate_docs_pages(ctx: GenerationContext, out_dir: Path | None = None) -> GenerationResult:
    out = Path(out_dir) if out_dir is not None else ctx.default_out_dir
    result = GenerationResult()

    for page in ctx.mapping.pages:
        source = normalize_identifier(page.source)
        document = _read_source(ctx, source, SourceKind.NARRATIVE, result)
        if document is None:
            continue
        metadata = metadata_from_mapping(page, prepare_body(document.text))
        _emit(ctx, document, metadata, page.output, out, result)

    return result


def generate_skills_pages(ctx: GenerationContext, out_dir: Path | None = None) -> GenerationResult:
    out = Path(out_dir) if out_dir is not None else ctx.default_out_dir
    config = ctx.config
    result = GenerationResult()

    for slug in ctx.skill_slugs:
        document = _read_source(ctx, config.skill_identifier(slug), SourceKind.SKILL, result)
        if document is None:
            continue
        metadata = skill_metadata(parse_skill_header(document.text), slug)
        _emit(ctx, document, metadata, config.skill_output(slug), out, result)

    document = _read_source(ctx, config.workflow_source, SourceKind.WORKFLOW_EXAMPLE, result)
    if document is not None:
        metadata = workflow_metadata(
            prepare_body(document.text),
            default_title=config.workflow_title,
            description=config.workflow_description,
        )
        _emit(ctx, document, metadata, config.workflow_output, out, result)

    return result


def generate_all(
    ctx: GenerationContext,
    out_dir: Path | None = None,
    *,
    only: str | None = None,
) -> GenerationResult:
    if only is not None and only not in SECTIONS:
        raise ValueError(f"unknown section {only!r}; expected one of {SECTIONS}")

    result = GenerationResult()
    if only in (None, "docs"):
        print("Docs pages:")
        result = result + generate_docs_pages(ctx, out_dir)
    if only in (None, "skills"):
        print("Skills pages:")
        result = result + generate_skills_pages(ctx, out_dir)
    return result
