"""Deterministic IO helpers shared by the generators and the freshness check."""

__all__: list[str] = [
    "hash_utils",
    "stable_json",
    "text_io",
]
