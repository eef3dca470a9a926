"""Per-page transforms: metadata extraction, MDX escaping and page emission."""

__all__: list[str] = [
    "emitter",
    "escaping",
    "metadata",
]
