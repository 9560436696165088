"""Immutable bundle registry and the name resolver."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, TypeVar, Union, overload

from ..schemas.bundle import BundleSpec
from .catalog import BUNDLES

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class UnknownBundleError(KeyError):
    """Raised when a requested bundle name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Could not find bundle: {self.name}"


class BundleRegistry(Mapping[str, BundleSpec]):
    """Read-only mapping of bundle name to spec.

    The table passed in is copied, so later changes to the caller's dict do
    not leak into the registry.
    """

    def __init__(self, bundles: Mapping[str, BundleSpec]) -> None:
        table = dict(bundles)
        for name, spec in table.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Bundle names must be non-empty strings (got {name!r})")
            if not isinstance(spec, BundleSpec):
                raise TypeError(f"Bundle '{name}' must be a BundleSpec (got {type(spec).__name__})")
        self._bundles: Mapping[str, BundleSpec] = MappingProxyType(table)

    def __getitem__(self, name: str) -> BundleSpec:
        return self.require(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __contains__(self, name: object) -> bool:
        return name in self._bundles

    def __repr__(self) -> str:
        return f"BundleRegistry({len(self._bundles)} bundles)"

    @overload
    def get(self, name: str) -> Optional[BundleSpec]: ...

    @overload
    def get(self, name: str, default: Union[BundleSpec, _T]) -> Union[BundleSpec, _T]: ...

    def get(self, name: str, default: object = None) -> object:
        return self._bundles.get(name, default)

    def require(self, name: str) -> BundleSpec:
        spec = self._bundles.get(name)
        if spec is None:
            logger.debug("Unknown bundle requested: %s", name)
            raise UnknownBundleError(name)
        return spec

    def names(self) -> List[str]:
        return list(self._bundles)

    def as_mapping(self) -> Mapping[str, BundleSpec]:
        return self._bundles

    def resolve(self, names: Sequence[str]) -> List[BundleSpec]:
        """Return the specs for ``names`` in request order.

        Stops at the first unknown name and raises ``UnknownBundleError``;
        nothing is returned for the names that did resolve. Repeated names
        share the same spec instance.
        """

        if isinstance(names, str):
            raise TypeError("resolve() expects a sequence of bundle names, not a single string")
        resolved: List[BundleSpec] = []
        for name in names:
            resolved.append(self.require(name))
        logger.debug("Resolved %d bundle(s)", len(resolved))
        return resolved


DEFAULT_REGISTRY = BundleRegistry(BUNDLES)


def resolve(names: Sequence[str]) -> List[BundleSpec]:
    """Resolve bundle names against the built-in registry."""

    return DEFAULT_REGISTRY.resolve(names)
