from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from swarm_docs.model import DocsMapping, MappingPage
from swarm_docs.util.stable_json import read_json

_OPTIONAL_KEYS = ("title", "description", "sidebarLabel")


class MappingError(ValueError):
    """The docs mapping is missing or malformed; nothing can be generated."""


def _validate_mapping_minimal(data: Any) -> None:
    # Runtime check only; the full JSON Schema (schemas/docs_mapping.schema.json)
    # is enforced in tests.
    if not isinstance(data, dict):
        raise MappingError("docs mapping must be a JSON object")
    output_dir = data.get("outputDir")
    if not isinstance(output_dir, str) or not output_dir.strip():
        raise MappingError("docs mapping outputDir must be a non-empty string")
    pages = data.get("pages")
    if not isinstance(pages, list):
        raise MappingError("docs mapping must contain a 'pages' array")
    for i, page in enumerate(pages):
        if not isinstance(page, dict):
            raise MappingError(f"pages[{i}] must be an object")
        for k in ("source", "output"):
            v = page.get(k)
            if not isinstance(v, str) or not v.strip():
                raise MappingError(f"pages[{i}].{k} must be a non-empty string")
        for k in _OPTIONAL_KEYS:
            v = page.get(k)
            if v is not None and not isinstance(v, str):
                raise MappingError(f"pages[{i}].{k} must be a string when present")


def parse_docs_mapping(data: Any) -> DocsMapping:
    _validate_mapping_minimal(data)
    pages = tuple(
        MappingPage(
            source=p["source"],
            output=p["output"],
            title=p.get("title") or None,
            description=p.get("description") or None,
            sidebar_label=p.get("sidebarLabel") or None,
        )
        for p in data["pages"]
    )
    return DocsMapping(output_dir=data["outputDir"], pages=pages)


def load_docs_mapping(path: Path) -> DocsMapping:
    if not path.is_file():
        raise MappingError(f"docs mapping not found: {path}")
    try:
        data = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MappingError(f"failed to read docs mapping {path}: {exc}") from exc
    return parse_docs_mapping(data)
