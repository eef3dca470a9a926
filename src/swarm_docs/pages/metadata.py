"""Page metadata from the two source conventions.

Narrative docs take their metadata from the docs mapping, falling back to the
first level-1 heading and then to ``"Untitled"``. Skill descriptors carry a
``---`` delimited header with single-line ``name:`` and ``description:`` keys.
Only those keys are read; this is not a YAML parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from swarm_docs.model import MappingPage, PageMetadata

UNTITLED = "Untitled"

_HEADER_RE = re.compile(r"\A---\n(.*?)\n---(?:\n|\Z)", re.DOTALL)
_H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*$")


@dataclass(frozen=True, slots=True)
class SkillHeader:
    name: str | None
    description: str | None
    body: str


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Return ``(header, body)``; header is None when the text has none."""

    m = _HEADER_RE.match(text)
    if not m:
        return None, text
    return m.group(1), text[m.end() :]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def header_scalar(header: str, key: str) -> str | None:
    pat = re.compile(rf"^{re.escape(key)}:[ \t]*(.+)$", re.MULTILINE)
    m = pat.search(header)
    if not m:
        return None
    value = _unquote(m.group(1).strip())
    return value or None


def parse_skill_header(text: str) -> SkillHeader:
    header, body = split_front_matter(text)
    if header is None:
        return SkillHeader(name=None, description=None, body=text)
    return SkillHeader(
        name=header_scalar(header, "name"),
        description=header_scalar(header, "description"),
        body=body,
    )


def extract_title(body: str) -> str | None:
    """First level-1 heading outside fenced code, or None."""

    in_fence = False
    for line in body.split("\n"):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m = _H1_RE.match(line)
        if m:
            return m.group(1)
    return None


def humanize(slug: str) -> str:
    """``task-system`` -> ``Task System``."""

    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def metadata_from_mapping(page: MappingPage, body: str) -> PageMetadata:
    title = page.title or extract_title(body) or UNTITLED
    return PageMetadata(
        title=title,
        description=page.description,
        sidebar_label=page.sidebar_label,
    )


def skill_metadata(header: SkillHeader, slug: str) -> PageMetadata:
    return PageMetadata(
        title=humanize(header.name or slug),
        description=header.description,
    )


def workflow_metadata(body: str, *, default_title: str, description: str) -> PageMetadata:
    return PageMetadata(title=extract_title(body) or default_title, description=description)
