from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path

from swarm_docs.corpus.link_rewriter import LinkDiagnostic, rewrite_links
from swarm_docs.model import DocumentIdentifier, GeneratedPage, PageMetadata, SourceDocument
from swarm_docs.pages.escaping import escape_mdx
from swarm_docs.pages.metadata import split_front_matter
from swarm_docs.util.text_io import write_text_lf

_HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
# One H1, optionally preceded by blank lines, plus the blank lines after it.
_LEADING_H1_RE = re.compile(r"\A(?:[ \t]*\n)*#[ \t]+[^\n]*(?:\n+|\Z)")


def strip_front_matter(text: str) -> str:
    return split_front_matter(text)[1]


def strip_html_comments(text: str) -> str:
    return _HTML_COMMENT_RE.sub("", text)


def strip_leading_h1(text: str) -> str:
    return _LEADING_H1_RE.sub("", text, count=1)


def _quote(value: str) -> str:
    # A JSON string is a valid YAML double-quoted scalar.
    return json.dumps(value, ensure_ascii=False)


def render_front_matter(metadata: PageMetadata) -> str:
    lines = ["---", f"title: {_quote(metadata.title)}"]
    if metadata.description:
        lines.append(f"description: {_quote(metadata.description)}")
    if metadata.sidebar_label and metadata.sidebar_label != metadata.title:
        lines.append("sidebar:")
        lines.append(f"  label: {_quote(metadata.sidebar_label)}")
    lines.append("---")
    return "\n".join(lines)


def prepare_body(text: str) -> str:
    """Front matter and HTML comments removed: the body metadata is read from."""

    return strip_html_comments(strip_front_matter(text))


def emit_page(
    document: SourceDocument,
    metadata: PageMetadata,
    link_map: Mapping[DocumentIdentifier, str],
    output_path: str,
    *,
    diagnostics: list[LinkDiagnostic] | None = None,
) -> GeneratedPage:
    body = prepare_body(document.text)
    body = rewrite_links(body, link_map, document.identifier, diagnostics=diagnostics)
    body = strip_leading_h1(body)
    body = escape_mdx(body)

    content = f"{render_front_matter(metadata)}\n\n{body.strip()}\n"
    return GeneratedPage(output_path=output_path, content=content)


def write_page(page: GeneratedPage, out_dir: Path) -> Path:
    out_path = Path(out_dir) / page.output_path
    write_text_lf(out_path, page.content)
    return out_path
