"""Source-to-MDX documentation pipeline.

Turns narrative docs and skill descriptors into the content corpus of the
documentation site, and checks that the published corpus matches its sources.
"""

__version__ = "1.0.0"

__all__: list[str] = [
    "config",
    "corpus",
    "model",
    "pages",
    "pipeline",
]
