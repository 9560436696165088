"""Registry table files (JSON or YAML)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from ..schemas.bundle import BundleSpec
from .resolver import BundleRegistry

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_registry(path: Path) -> BundleRegistry:
    """Load a registry from a table file keyed by bundle name."""

    path = Path(path)
    suffix = _check_suffix(path)
    text = path.read_text(encoding="utf-8")
    if suffix in JSON_SUFFIXES:
        payload = json.loads(text)
    else:
        payload = yaml.safe_load(text)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError(f"Registry file must contain a mapping of bundle names: {path}")

    bundles: Dict[str, BundleSpec] = {}
    for name, entry in payload.items():
        if not isinstance(name, str):
            raise ValueError(f"Bundle names must be strings (got {name!r}): {path}")
        bundles[name] = BundleSpec.model_validate(entry)
    logger.info("Loaded %d bundle(s) from %s", len(bundles), path)
    return BundleRegistry(bundles)


def dump_registry(registry: Mapping[str, BundleSpec], path: Path) -> None:
    """Write a registry to disk in the format implied by the suffix."""

    path = Path(path)
    suffix = _check_suffix(path)
    payload: Dict[str, Any] = {name: spec.to_payload() for name, spec in registry.items()}
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix in JSON_SUFFIXES:
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")


def merge_registries(base: Mapping[str, BundleSpec], overrides: Mapping[str, BundleSpec]) -> BundleRegistry:
    """Return a new registry with ``overrides`` replacing or extending ``base``."""

    merged: Dict[str, BundleSpec] = dict(base.items())
    merged.update(overrides.items())
    return BundleRegistry(merged)


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise ValueError(f"Unsupported registry file type '{suffix or path.name}': {path}")
    return suffix
