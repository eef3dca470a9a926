from __future__ import annotations

_FENCE = "```"
_TAG_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ/!")
_TAG_END_CONTEXT = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789\"'/-"
)


def _escape_line(line: str) -> str:
    out: list[str] = []
    in_inline_code = False
    for i, ch in enumerate(line):
        if ch == "`":
            in_inline_code = not in_inline_code
            out.append(ch)
        elif in_inline_code:
            out.append(ch)
        elif ch == "{":
            out.append("\\{")
        elif ch == "}":
            out.append("\\}")
        elif ch == "<":
            nxt = line[i + 1] if i + 1 < len(line) else ""
            out.append(ch if nxt and nxt in _TAG_START else "&lt;")
        elif ch == ">" and i > 0 and line[i - 1] not in _TAG_END_CONTEXT:
            out.append("&gt;")
        else:
            out.append(ch)
    return "".join(out)


def escape_mdx(text: str) -> str:
    """Escape MDX-significant characters in prose, leaving code untouched.

    Fenced blocks (``` toggled by any line whose stripped form starts with
    three backticks) and inline code spans (toggled by each backtick) are
    copied verbatim. A ``>`` in column 0 is blockquote markup and is kept.
    Unbalanced fences or backticks are not an error.
    """

    result: list[str] = []
    in_fence = False
    for line in text.split("\n"):
        if line.lstrip().startswith(_FENCE):
            in_fence = not in_fence
            result.append(line)
        elif in_fence:
            result.append(line)
        else:
            result.append(_escape_line(line))
    return "\n".join(result)
