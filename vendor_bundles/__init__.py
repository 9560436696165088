"""Vendor bundle registry for staging third-party assets."""

__version__ = "0.1.0"
from .registry import (
    BUNDLES,
    DEFAULT_REGISTRY,
    BundleRegistry,
    UnknownBundleError,
    dump_registry,
    load_registry,
    merge_registries,
    resolve,
)
from .schemas.bundle import BundleSpec

__all__ = [
    "__version__",
    "BUNDLES",
    "DEFAULT_REGISTRY",
    "BundleRegistry",
    "BundleSpec",
    "UnknownBundleError",
    "dump_registry",
    "load_registry",
    "merge_registries",
    "resolve",
]
