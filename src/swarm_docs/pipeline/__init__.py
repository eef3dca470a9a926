"""Generation drivers and the freshness check."""

__all__: list[str] = [
    "freshness",
    "generate",
    "mapping",
]
