from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

# Repo-relative paths handed to ruff: the whole package, the CLIs, the CI helpers
# and the tests.
LINT_PATHS: tuple[str, ...] = (
    "src/swarm_docs",
    "scripts",
    "tools/ci",
    "tests",
)


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _missing_paths(repo_root: Path) -> list[str]:
    return [rel for rel in LINT_PATHS if not (repo_root / rel).exists()]


def _ruff_command(*, fix: bool) -> list[str]:
    cmd = [sys.executable, "-m", "ruff", "check"]
    if fix:
        cmd.append("--fix")
    return [*cmd, *LINT_PATHS]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run ruff over the swarm-docs sources")
    ap.add_argument("--fix", action="store_true", help="Let ruff apply safe fixes")
    args = ap.parse_args(argv)
    repo_root = _repo_root()

    missing = _missing_paths(repo_root)
    if missing:
        print(f"ERROR: lint paths not found: {', '.join(missing)}", file=sys.stderr)
        return 2

    cmd = _ruff_command(fix=args.fix)
    print("ruff:", " ".join(cmd[1:]))
    return subprocess.run(cmd, cwd=str(repo_root), check=False).returncode


if __name__ == "__main__":
    raise SystemExit(main())
