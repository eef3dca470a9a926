from __future__ import annotations

import posixpath

from swarm_docs.model import DocumentIdentifier


def normalize_identifier(path: str) -> DocumentIdentifier:
    """Normalize a corpus-relative path to its identifier form.

    Separator-agnostic: backslashes are treated as separators. ``./`` and
    ``../`` segments and duplicate separators are collapsed. ``""`` maps to
    ``"."`` (the corpus root), like ``posixpath.normpath``.
    """

    return posixpath.normpath(path.replace("\\", "/"))


def parent_of(identifier: DocumentIdentifier) -> str:
    return posixpath.dirname(normalize_identifier(identifier))


def resolve_relative(source: DocumentIdentifier, target_path: str) -> DocumentIdentifier:
    """Resolve ``target_path`` against the directory containing ``source``."""

    return normalize_identifier(posixpath.join(parent_of(source), target_path.replace("\\", "/")))


def basename_of(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]
