"""Command-line helpers for inspecting and resolving vendor bundles."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from vendor_bundles.registry.loader import dump_registry, load_registry, merge_registries
from vendor_bundles.registry.resolver import DEFAULT_REGISTRY, BundleRegistry, UnknownBundleError
from vendor_bundles.schemas.bundle import BundleSpec

LOG_LEVEL_ENV = "VENDOR_BUNDLES_LOG_LEVEL"
EXIT_UNKNOWN_BUNDLE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    registry = _load_active_registry(args)

    if args.command == "resolve":
        return _handle_resolve(args, registry)
    if args.command == "list":
        return _handle_list(registry)
    if args.command == "show":
        return _handle_show(args, registry)
    if args.command == "export":
        return _handle_export(args, registry)

    parser.error(f"Unknown command '{args.command}'")
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vendor-bundles", description="Vendor bundle registry helpers.")
    parser.add_argument("--registry", action="append", help="Registry file merged over the built-ins (repeatable).")
    parser.add_argument("--replace", action="store_true", help="Use only the --registry files.")
    parser.add_argument("--workspace-root")
    parser.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "WARNING"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve bundle names in order.")
    resolve.add_argument("names", nargs="+")

    subparsers.add_parser("list", help="List registered bundle names.")

    show = subparsers.add_parser("show", help="Show one bundle.")
    show.add_argument("name")

    export = subparsers.add_parser("export", help="Write the active registry to a JSON or YAML file.")
    export.add_argument("--output", required=True)

    return parser


def _handle_resolve(args: argparse.Namespace, registry: BundleRegistry) -> int:
    try:
        specs = registry.resolve(args.names)
    except UnknownBundleError as exc:
        return _report_unknown(exc)
    payload = {
        "bundles": [_bundle_payload(name, spec) for name, spec in zip(args.names, specs)],
    }
    _print_json(payload)
    return 0


def _handle_list(registry: BundleRegistry) -> int:
    names = registry.names()
    _print_json({"names": names, "count": len(names)})
    return 0


def _handle_show(args: argparse.Namespace, registry: BundleRegistry) -> int:
    try:
        spec = registry.require(args.name)
    except UnknownBundleError as exc:
        return _report_unknown(exc)
    _print_json(_bundle_payload(args.name, spec))
    return 0


def _handle_export(args: argparse.Namespace, registry: BundleRegistry) -> int:
    workspace = _resolve_workspace(args.workspace_root)
    output = _resolve_path(args.output, workspace)
    dump_registry(registry, output)
    _print_json({"path": str(output), "count": len(registry)})
    return 0


def _load_active_registry(args: argparse.Namespace) -> BundleRegistry:
    workspace = _resolve_workspace(args.workspace_root)
    registry = BundleRegistry({}) if args.replace else DEFAULT_REGISTRY
    for value in args.registry or []:
        registry = merge_registries(registry, load_registry(_resolve_path(value, workspace)))
    return registry


def _report_unknown(exc: UnknownBundleError) -> int:
    _print_json({"error": str(exc), "name": exc.name})
    return EXIT_UNKNOWN_BUNDLE


def _bundle_payload(name: str, spec: BundleSpec) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": name}
    payload.update(spec.to_payload())
    payload.setdefault("include", None)
    return payload


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    logging.basicConfig(level=numeric, stream=sys.stderr, format="%(name)s - %(levelname)s - %(message)s")


def _resolve_workspace(value: Optional[str]) -> Path:
    return Path(value).resolve() if value else Path.cwd()


def _resolve_path(value: str, workspace: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = workspace / path
    return path.resolve()


def _print_json(payload: Mapping[str, object]) -> None:
    print(json.dumps(payload, indent=2, default=str))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
