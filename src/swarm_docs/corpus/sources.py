from __future__ import annotations

from pathlib import Path
from typing import Protocol

from swarm_docs.corpus.identifiers import normalize_identifier
from swarm_docs.model import DocumentIdentifier
from swarm_docs.util.text_io import read_text_lf


class SourceEnumerator(Protocol):
    """Directory listing and reads for the source corpus.

    Kept behind a protocol so the pipeline can run against an in-memory corpus.
    """

    def skill_slugs(self) -> list[str]: ...

    def exists(self, identifier: DocumentIdentifier) -> bool: ...

    def read_text(self, identifier: DocumentIdentifier) -> str: ...


class FilesystemSourceEnumerator:
    def __init__(
        self,
        project_root: Path,
        *,
        skills_dir_name: str = "skills",
        skill_filename: str = "SKILL.md",
    ) -> None:
        self.project_root = Path(project_root)
        self.skills_dir_name = skills_dir_name
        self.skill_filename = skill_filename

    def skill_slugs(self) -> list[str]:
        skills_dir = self.project_root / self.skills_dir_name
        if not skills_dir.is_dir():
            return []
        return sorted(
            child.name
            for child in skills_dir.iterdir()
            if child.is_dir() and (child / self.skill_filename).is_file()
        )

    def _path(self, identifier: DocumentIdentifier) -> Path | None:
        rel = normalize_identifier(identifier)
        # Identifiers are corpus-root relative; anything outside the root is not a source.
        if rel == ".." or rel.startswith(("../", "/")):
            return None
        return self.project_root / rel

    def exists(self, identifier: DocumentIdentifier) -> bool:
        path = self._path(identifier)
        return path is not None and path.is_file()

    def read_text(self, identifier: DocumentIdentifier) -> str:
        path = self._path(identifier)
        if path is None:
            raise FileNotFoundError(identifier)
        return read_text_lf(path)


class InMemorySourceEnumerator:
    """Corpus held in a dict of identifier -> text."""

    def __init__(
        self,
        files: dict[DocumentIdentifier, str],
        *,
        skills_dir_name: str = "skills",
        skill_filename: str = "SKILL.md",
    ) -> None:
        self.files = dict(files)
        self.skills_dir_name = skills_dir_name
        self.skill_filename = skill_filename

    def skill_slugs(self) -> list[str]:
        slugs: set[str] = set()
        for identifier in self.files:
            parts = identifier.split("/")
            if len(parts) == 3 and parts[0] == self.skills_dir_name and parts[2] == self.skill_filename:
                slugs.add(parts[1])
        return sorted(slugs)

    def exists(self, identifier: DocumentIdentifier) -> bool:
        return identifier in self.files

    def read_text(self, identifier: DocumentIdentifier) -> str:
        try:
            return self.files[identifier]
        except KeyError:
            raise FileNotFoundError(identifier) from None
