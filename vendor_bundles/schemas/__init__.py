"""Schema definitions for vendor bundles."""

from .bundle import BundleSpec

__all__ = [
    "BundleSpec",
]
