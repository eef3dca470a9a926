"""Corpus-wide addressing: identifiers, the link map and link rewriting."""

__all__: list[str] = [
    "identifiers",
    "link_map",
    "link_rewriter",
    "sources",
]
