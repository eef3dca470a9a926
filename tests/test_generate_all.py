from __future__ import annotations

import json
from pathlib import Path

from tests.fixtures import sample_files, sample_mapping, write_corpus

README_URL = "https://github.com/zircote/claude-team-orchestration/blob/main/README.md"


def _out(root: Path) -> Path:
    return root / "site" / "src" / "content" / "docs"


def test_generate_all_writes_every_page(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")

    rc = generate_all.main(["--project-root", str(root)])
    assert rc == 0

    out = _out(root)
    expected = [
        "index.mdx",
        "getting-started/getting-started.mdx",
        "reference/reference.mdx",
        "skills/messaging.mdx",
        "skills/task-system.mdx",
        "skills/complete-workflows.mdx",
    ]
    for rel in expected:
        assert (out / rel).is_file(), rel

    stdout = capsys.readouterr().out
    assert "Done: 6 generated, 0 skipped" in stdout
    assert stdout.index("OK: index.mdx") < stdout.index("OK: skills/messaging.mdx")


def test_generated_docs_page_content(tmp_path: Path) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    assert generate_all.main(["--project-root", str(root)]) == 0

    text = (_out(root) / "getting-started" / "getting-started.mdx").read_text(encoding="utf-8")

    assert text.startswith('---\ntitle: "Getting Started"\n---\n\nRead the ')
    assert "draft: true" not in text
    assert "maintained by hand" not in text
    assert "# Getting Started" not in text
    assert "[task system](/skills/task-system/#usage)" in text
    assert "[reference](/reference/reference/)" in text
    assert f"[README]({README_URL})" in text
    assert "Inline `{config}` stays, \\{prose\\} is escaped, and 1 &lt; 2." in text
    assert '```json\n{"team": "alpha"}\n```\n' in text
    assert text.endswith("```\n")

    index = (_out(root) / "index.mdx").read_text(encoding="utf-8")
    assert index.startswith(
        '---\ntitle: "swarm"\ndescription: "Multi-agent team orchestration."\n'
        'sidebar:\n  label: "Introduction"\n---\n\n'
    )
    assert "[Getting Started](/getting-started/getting-started/)" in index
    assert "[skills](/skills/task-system/)" in index


def test_generated_skill_pages(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    assert generate_all.main(["--project-root", str(root)]) == 0
    out = _out(root)

    task = (out / "skills" / "task-system.mdx").read_text(encoding="utf-8")
    assert task == (
        "---\n"
        'title: "Task System"\n'
        'description: "Shared task list for coordinating teammates."\n'
        "---\n"
        "\n"
        "## Usage\n"
        "\n"
        "Create tasks with `TaskCreate({subject})`. See [messaging](/skills/messaging/).\n"
    )

    messaging = (out / "skills" / "messaging.mdx").read_text(encoding="utf-8")
    assert messaging.startswith('---\ntitle: "Messaging"\n---\n\n')
    assert "<SendMessage> and a =&gt; b arrows." in messaging

    workflows = (out / "skills" / "complete-workflows.mdx").read_text(encoding="utf-8")
    assert workflows == (
        "---\n"
        'title: "End-to-End Workflows"\n'
        'description: "End-to-end orchestration workflow examples."\n'
        "---\n"
        "\n"
        "Back to [tasks](/skills/task-system/).\n"
    )

    # Reference page: sidebar label equals title, filename fallback is ambiguous.
    reference = (out / "reference" / "reference.mdx").read_text(encoding="utf-8")
    assert "sidebar:" not in reference
    assert "[messaging](/skills/messaging/)" in reference
    assert "[nowhere](missing.md)" in reference
    err = capsys.readouterr().err
    assert "WARN: docs/reference.md: link 'SKILL.md' matched several pages" in err
    assert (
        "WARN: docs/reference.md: link 'missing.md' could not be resolved, left unchanged" in err
    )


def test_missing_source_is_skipped_and_run_continues(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    mapping = sample_mapping()
    mapping["pages"].insert(0, {"source": "docs/missing.md", "output": "missing.mdx"})
    root = write_corpus(tmp_path / "project", mapping=mapping)

    rc = generate_all.main(["--project-root", str(root)])
    assert rc == 1

    captured = capsys.readouterr()
    assert "SKIP: docs/missing.md (not found)" in captured.err
    assert "Done: 6 generated, 1 skipped" in captured.out
    assert not (_out(root) / "missing.mdx").exists()
    assert (_out(root) / "index.mdx").exists()


def test_missing_workflow_example_is_skipped(tmp_path: Path) -> None:
    from scripts import generate_all

    files = sample_files()
    del files["skills/orchestration-patterns/examples/complete-workflows.md"]
    root = write_corpus(tmp_path / "project", files=files)

    assert generate_all.main(["--project-root", str(root), "--only", "skills"]) == 1
    assert not (_out(root) / "skills" / "complete-workflows.mdx").exists()


def test_only_skills_and_custom_out_dir(tmp_path: Path) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    out_dir = tmp_path / "custom"

    rc = generate_all.main(
        ["--project-root", str(root), "--only", "skills", "--out-dir", str(out_dir)]
    )
    assert rc == 0

    written = sorted(p.relative_to(out_dir).as_posix() for p in out_dir.rglob("*.mdx"))
    assert written == [
        "skills/complete-workflows.mdx",
        "skills/messaging.mdx",
        "skills/task-system.mdx",
    ]
    assert not _out(root).exists()


def test_missing_mapping_exits_2(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    rc = generate_all.main(["--project-root", str(tmp_path / "empty")])
    assert rc == 2
    assert "ERROR: docs mapping not found" in capsys.readouterr().err


def test_malformed_mapping_exits_2(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    mapping_path = root / "site" / "docs-mapping.json"
    mapping_path.write_text(json.dumps({"outputDir": "out", "pages": [{"source": "a.md"}]}))

    assert generate_all.main(["--project-root", str(root)]) == 2
    assert "pages[0].output must be a non-empty string" in capsys.readouterr().err


def test_generation_is_deterministic(tmp_path: Path) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    a, b = tmp_path / "a", tmp_path / "b"
    assert generate_all.main(["--project-root", str(root), "--out-dir", str(a)]) == 0
    assert generate_all.main(["--project-root", str(root), "--out-dir", str(b)]) == 0

    files_a = {p.relative_to(a).as_posix(): p.read_bytes() for p in a.rglob("*.mdx")}
    files_b = {p.relative_to(b).as_posix(): p.read_bytes() for p in b.rglob("*.mdx")}
    assert files_a == files_b


def test_crlf_sources_generate_lf_pages(tmp_path: Path) -> None:
    from scripts import generate_all

    crlf = {rel: text.replace("\n", "\r\n") for rel, text in sample_files().items()}
    crlf_root = write_corpus(tmp_path / "crlf", files=crlf)
    lf_root = write_corpus(tmp_path / "lf")
    assert (crlf_root / "docs" / "index.md").read_bytes().count(b"\r\n") > 0

    assert generate_all.main(["--project-root", str(crlf_root)]) == 0
    assert generate_all.main(["--project-root", str(lf_root)]) == 0

    page = (_out(crlf_root) / "getting-started" / "getting-started.mdx").read_bytes()
    assert b"\r" not in page
    assert page.startswith(b'---\ntitle: "Getting Started"\n---\n\nRead the ')

    def _pages(out: Path) -> dict[str, bytes]:
        return {p.relative_to(out).as_posix(): p.read_bytes() for p in out.rglob("*.mdx")}

    assert _pages(_out(crlf_root)) == _pages(_out(lf_root))


def test_undecodable_source_is_skipped_and_run_continues(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    root = write_corpus(tmp_path / "project")
    (root / "docs" / "index.md").write_bytes(b"# Welcome\n\n\xff\xfe not utf-8\n")

    rc = generate_all.main(["--project-root", str(root)])
    assert rc == 1

    captured = capsys.readouterr()
    assert "SKIP: docs/index.md (unreadable: UnicodeDecodeError)" in captured.err
    assert "Done: 5 generated, 1 skipped" in captured.out
    assert not (_out(root) / "index.mdx").exists()
    assert (_out(root) / "skills" / "complete-workflows.mdx").is_file()


def test_mapping_sources_are_normalized_and_confined_to_root(tmp_path: Path, capsys) -> None:
    from scripts import generate_all

    (tmp_path / "outside.md").write_text("# Outside\n", encoding="utf-8")
    mapping = sample_mapping()
    mapping["pages"][1]["source"] = "docs\\guide\\getting-started.md"
    mapping["pages"].append({"source": "../outside.md", "output": "outside.mdx"})
    root = write_corpus(tmp_path / "project", mapping=mapping)

    rc = generate_all.main(["--project-root", str(root)])
    assert rc == 1

    captured = capsys.readouterr()
    assert (_out(root) / "getting-started" / "getting-started.mdx").is_file()
    assert "SKIP: ../outside.md (not found)" in captured.err
    assert not (_out(root) / "outside.mdx").exists()
    assert "Done: 6 generated, 1 skipped" in captured.out
