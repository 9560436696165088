"""Bundle registry, resolver and table files."""

from .catalog import BUNDLES, REACT_BUNDLES
from .loader import dump_registry, load_registry, merge_registries
from .resolver import DEFAULT_REGISTRY, BundleRegistry, UnknownBundleError, resolve

__all__ = [
    "BUNDLES",
    "REACT_BUNDLES",
    "DEFAULT_REGISTRY",
    "BundleRegistry",
    "UnknownBundleError",
    "dump_registry",
    "load_registry",
    "merge_registries",
    "resolve",
]
