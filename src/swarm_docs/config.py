from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from swarm_docs.model import DocsMapping

# src/swarm_docs/config.py -> repo root is ../../..
REPO_ROOT = Path(__file__).resolve().parents[2]

SKILLS_DIR_NAME = "skills"
SKILL_FILENAME = "SKILL.md"

WORKFLOW_SOURCE = "skills/orchestration-patterns/examples/complete-workflows.md"
WORKFLOW_OUTPUT = "skills/complete-workflows.mdx"
WORKFLOW_ROUTE = "/skills/complete-workflows/"
WORKFLOW_TITLE = "Complete Workflows"
WORKFLOW_DESCRIPTION = "End-to-end orchestration workflow examples."

# Files referenced from the corpus but not published on the site.
EXTERNAL_LINKS: tuple[tuple[str, str], ...] = (
    (
        "README.md",
        "https://github.com/zircote/claude-team-orchestration/blob/main/README.md",
    ),
)


@dataclass(frozen=True, slots=True)
class SiteConfig:
    project_root: Path
    site_root: Path
    mapping_path: Path
    skills_dir_name: str = SKILLS_DIR_NAME
    skill_filename: str = SKILL_FILENAME
    workflow_source: str = WORKFLOW_SOURCE
    workflow_output: str = WORKFLOW_OUTPUT
    workflow_route: str = WORKFLOW_ROUTE
    workflow_title: str = WORKFLOW_TITLE
    workflow_description: str = WORKFLOW_DESCRIPTION
    external_links: tuple[tuple[str, str], ...] = EXTERNAL_LINKS

    @classmethod
    def from_root(cls, project_root: str | Path | None = None) -> SiteConfig:
        root = Path(project_root).resolve() if project_root is not None else REPO_ROOT
        site_root = root / "site"
        return cls(
            project_root=root,
            site_root=site_root,
            mapping_path=site_root / "docs-mapping.json",
        )

    def output_dir(self, mapping: DocsMapping) -> Path:
        return self.site_root / mapping.output_dir

    def skill_identifier(self, slug: str) -> str:
        return f"{self.skills_dir_name}/{slug}/{self.skill_filename}"

    def skill_output(self, slug: str) -> str:
        return f"{self.skills_dir_name}/{slug}.mdx"

    def skill_route(self, slug: str) -> str:
        return f"/{self.skills_dir_name}/{slug}/"
