from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path: str | Path, data: Any) -> None:
    """Write ``data`` as sorted, indented UTF-8 JSON with a trailing newline.

    Parent directories are created; the output is byte-identical across runs.
    """

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
    p.write_text(text + "\n", encoding="utf-8", newline="\n")
