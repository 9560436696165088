from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from vendor_bundles.registry.loader import dump_registry, load_registry, merge_registries
from vendor_bundles.registry.resolver import DEFAULT_REGISTRY, UnknownBundleError


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_json_registry(tmp_path: Path) -> None:
    path = _write_json(
        tmp_path / "bundles.json",
        {
            "lodash": {"src": "node_modules/lodash", "include": ["lodash.min.js"], "dest": "vendor"},
            "fonts": {"src": "node_modules/fonts/dist", "dest": "fonts"},
        },
    )

    registry = load_registry(path)

    assert registry.names() == ["lodash", "fonts"]
    lodash, fonts = registry.resolve(["lodash", "fonts"])
    assert lodash.included_files == ("lodash.min.js",)
    assert fonts.included_files is None
    assert fonts.destination_directory == "fonts"


def test_load_yaml_registry(tmp_path: Path) -> None:
    path = tmp_path / "bundles.yml"
    path.write_text(
        "lodash:\n  src: node_modules/lodash\n  include:\n    - lodash.min.js\n  dest: vendor\n",
        encoding="utf-8",
    )

    registry = load_registry(path)

    assert registry["lodash"].source_directory == "node_modules/lodash"


def test_load_rejects_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "bundles.toml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        load_registry(path)


def test_load_rejects_non_mapping(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "bundles.json", ["jquery"])

    with pytest.raises(ValueError):
        load_registry(path)


def test_load_rejects_invalid_entry(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "bundles.json", {"broken": {"src": "node_modules/broken"}})

    with pytest.raises(ValidationError):
        load_registry(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_registry(tmp_path / "missing.json")


@pytest.mark.parametrize("filename", ["bundles.json", "bundles.yaml"])
def test_dump_and_load_registry(tmp_path: Path, filename: str) -> None:
    path = tmp_path / filename
    dump_registry(DEFAULT_REGISTRY, path)

    loaded = load_registry(path)

    assert loaded.names() == DEFAULT_REGISTRY.names()
    assert dict(loaded.items()) == dict(DEFAULT_REGISTRY.items())


def test_dump_yaml_omits_missing_include(tmp_path: Path) -> None:
    path = tmp_path / "bundles.yaml"
    dump_registry(DEFAULT_REGISTRY, path)

    payload = yaml.safe_load(path.read_text(encoding="utf-8"))

    assert payload["cliqz-history"] == {"src": "node_modules/cliqz-history/dist", "dest": "cliqz-history"}


def test_merge_overrides_and_extends(tmp_path: Path) -> None:
    overrides = load_registry(
        _write_json(
            tmp_path / "bundles.json",
            {
                "jquery": {"src": "node_modules/jquery/dist", "include": ["jquery.js"], "dest": "vendor"},
                "lodash": {"src": "node_modules/lodash", "dest": "vendor"},
            },
        )
    )

    merged = merge_registries(DEFAULT_REGISTRY, overrides)

    assert merged["jquery"].included_files == ("jquery.js",)
    assert merged.names()[-1] == "lodash"
    assert merged.names().index("jquery") == DEFAULT_REGISTRY.names().index("jquery")
    assert DEFAULT_REGISTRY["jquery"].included_files == ("jquery.min.js",)
    with pytest.raises(UnknownBundleError):
        DEFAULT_REGISTRY.require("lodash")


def test_load_rejects_non_string_names(tmp_path: Path) -> None:
    path = tmp_path / "bundles.yaml"
    path.write_text(
        "1:\n  src: node_modules/a\n  dest: vendor\n'1':\n  src: node_modules/b\n  dest: vendor\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Bundle names must be strings"):
        load_registry(path)


def test_load_logs_entry_count(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="vendor_bundles")
    path = _write_json(tmp_path / "bundles.json", {"lodash": {"src": "node_modules/lodash", "dest": "vendor"}})

    load_registry(path)

    assert any(
        record.levelno == logging.INFO and record.getMessage().startswith("Loaded 1 bundle(s) from")
        for record in caplog.records
    )
