from __future__ import annotations

import copy
import json
from pathlib import Path

# A small corpus covering every source kind: mapped docs (with and without
# front matter, titles and sidebar labels), skills with and without a header,
# and the workflow example.
SAMPLE_MAPPING: dict = {
    "outputDir": "src/content/docs",
    "pages": [
        {
            "source": "docs/index.md",
            "output": "index.mdx",
            "title": "swarm",
            "description": "Multi-agent team orchestration.",
            "sidebarLabel": "Introduction",
        },
        {
            "source": "docs/guide/getting-started.md",
            "output": "getting-started/getting-started.mdx",
        },
        {
            "source": "docs/reference.md",
            "output": "reference/reference.mdx",
            "sidebarLabel": "Reference",
        },
    ],
}

SAMPLE_FILES: dict[str, str] = {
    "docs/index.md": (
        "# Welcome\n"
        "\n"
        "Start with [Getting Started](guide/getting-started.md) or browse the "
        "[skills](../skills/task-system/SKILL.md).\n"
    ),
    "docs/guide/getting-started.md": (
        "---\n"
        "draft: true\n"
        "---\n"
        "<!-- maintained by hand -->\n"
        "# Getting Started\n"
        "\n"
        "Read the [task system](../../skills/task-system/SKILL.md#usage), the "
        "[reference](../reference.md) and the [README](../../README.md).\n"
        "\n"
        "Inline `{config}` stays, {prose} is escaped, and 1 < 2.\n"
        "\n"
        "```json\n"
        '{"team": "alpha"}\n'
        "```\n"
    ),
    "docs/reference.md": (
        "# Reference\n"
        "\n"
        "See [messaging](SKILL.md) for the fallback and [nowhere](missing.md).\n"
    ),
    "skills/task-system/SKILL.md": (
        "---\n"
        "name: task-system\n"
        'description: "Shared task list for coordinating teammates."\n'
        "---\n"
        "\n"
        "# Task System\n"
        "\n"
        "## Usage\n"
        "\n"
        "Create tasks with `TaskCreate({subject})`. See [messaging](../messaging/SKILL.md).\n"
    ),
    "skills/messaging/SKILL.md": (
        "# Messaging\n"
        "\n"
        "Teammates talk via <SendMessage> and a => b arrows.\n"
    ),
    "skills/orchestration-patterns/examples/complete-workflows.md": (
        "# End-to-End Workflows\n"
        "\n"
        "Back to [tasks](../../task-system/SKILL.md).\n"
    ),
}


def sample_mapping() -> dict:
    """Return a deep copy of the shared docs mapping.

    Tests should treat fixtures as immutable; a deep copy prevents accidental mutation.
    """

    return copy.deepcopy(SAMPLE_MAPPING)


def sample_files() -> dict[str, str]:
    return dict(SAMPLE_FILES)


def write_corpus(
    root: Path,
    *,
    files: dict[str, str] | None = None,
    mapping: dict | None = None,
) -> Path:
    """Lay out a project root: sources plus ``site/docs-mapping.json``."""

    for rel, text in (sample_files() if files is None else files).items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="\n")

    mapping_path = root / "site" / "docs-mapping.json"
    mapping_path.parent.mkdir(parents=True, exist_ok=True)
    mapping_path.write_text(
        json.dumps(sample_mapping() if mapping is None else mapping, indent=2) + "\n",
        encoding="utf-8",
    )
    return root
