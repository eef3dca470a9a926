from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from swarm_docs.config import SiteConfig
from swarm_docs.corpus.identifiers import normalize_identifier
from swarm_docs.model import DocumentIdentifier, MappingPage


class LinkMap(Mapping[DocumentIdentifier, str]):
    """Read-only, insertion-ordered identifier -> site URL mapping.

    Built once per generation run and shared by every page of that run.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[tuple[DocumentIdentifier, str]] = ()) -> None:
        data: dict[DocumentIdentifier, str] = {}
        for key, url in entries:
            data[normalize_identifier(key)] = url
        self._entries = MappingProxyType(data)

    def __getitem__(self, key: DocumentIdentifier) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[DocumentIdentifier]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LinkMap({dict(self._entries)!r})"


def route_for_output(output: str) -> str:
    """``how-to/patterns.mdx`` -> ``/how-to/patterns/``."""

    stem = output.replace("\\", "/")
    for suffix in (".mdx", ".md"):
        if stem.endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    return "/" + stem.strip("/") + "/"


def build_link_map(
    pages: Iterable[MappingPage],
    skill_slugs: Iterable[str],
    *,
    config: SiteConfig,
) -> LinkMap:
    """Merge mapped docs, skills, the workflow example and external references.

    Order of insertion is mapped docs, skills, workflow example, external
    references. A repeated identifier keeps its first URL, except external
    references, which always point to their literal URL.
    """

    entries: dict[DocumentIdentifier, str] = {}

    for page in pages:
        entries.setdefault(normalize_identifier(page.source), route_for_output(page.output))

    for slug in skill_slugs:
        entries.setdefault(normalize_identifier(config.skill_identifier(slug)), config.skill_route(slug))

    entries.setdefault(normalize_identifier(config.workflow_source), config.workflow_route)

    for identifier, url in config.external_links:
        entries[normalize_identifier(identifier)] = url

    return LinkMap(entries.items())
