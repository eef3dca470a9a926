"""Rewrite relative Markdown links to site routes.

Resolution order for ``[text](target)``:

1. pass-through for targets with a URL scheme (``https:``, ``mailto:``, ...),
   in-page anchors (``#...``), absolute site routes (``/...``) and targets with
   no path part;
2. exact lookup of the target resolved against the linking document's directory;
3. filename fallback: the first link map key (insertion order) whose last path
   segments equal the target's filename;
4. otherwise the link is left exactly as written.

Step 3 can pick the wrong page when several keys share a filename (every skill
is a ``SKILL.md``). Callers that pass a ``diagnostics`` list get a record of
every ambiguous or unresolved link.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from swarm_docs.corpus.identifiers import basename_of, resolve_relative
from swarm_docs.model import DocumentIdentifier

_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


@dataclass(frozen=True, slots=True)
class LinkDiagnostic:
    source: DocumentIdentifier
    target: str
    kind: str  # "ambiguous" | "unresolved"
    candidates: tuple[str, ...] = ()


def _is_pass_through(target: str) -> bool:
    t = target.strip()
    if not t or t.startswith(("#", "/")):
        return True
    # Any scheme (http, https, mailto, tel, ...) addresses something off-corpus.
    return _SCHEME_RE.match(t) is not None


def _filename_matches(link_map: Mapping[DocumentIdentifier, str], filename: str) -> list[str]:
    if not filename or filename in {".", ".."}:
        return []
    suffix = "/" + filename
    return [key for key in link_map if key == filename or key.endswith(suffix)]


def resolve_target(
    target: str,
    link_map: Mapping[DocumentIdentifier, str],
    source: DocumentIdentifier,
    *,
    diagnostics: list[LinkDiagnostic] | None = None,
) -> str | None:
    """Return the rewritten target, or None when the link must stay unchanged."""

    if _is_pass_through(target):
        return None

    path_part, sep, anchor = target.partition("#")
    if not path_part:
        return None
    suffix = f"#{anchor}" if sep and anchor else ""

    resolved = resolve_relative(source, path_part)
    url = link_map.get(resolved)
    if url is not None:
        return url + suffix

    matches = _filename_matches(link_map, basename_of(path_part))
    if not matches:
        if diagnostics is not None:
            diagnostics.append(LinkDiagnostic(source, target, "unresolved"))
        return None

    if len(matches) > 1 and diagnostics is not None:
        diagnostics.append(LinkDiagnostic(source, target, "ambiguous", tuple(matches)))
    return link_map[matches[0]] + suffix


def rewrite_links(
    body: str,
    link_map: Mapping[DocumentIdentifier, str],
    source: DocumentIdentifier,
    *,
    diagnostics: list[LinkDiagnostic] | None = None,
) -> str:
    def _replace(m: re.Match[str]) -> str:
        text, target = m.group(1), m.group(2)
        rewritten = resolve_target(target, link_map, source, diagnostics=diagnostics)
        if rewritten is None:
            return m.group(0)
        return f"[{text}]({rewritten})"

    return _LINK_RE.sub(_replace, body)
