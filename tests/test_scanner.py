"""Tests for file discovery."""

import os

import pytest

from codeviz.models import AnalysisConfig, AnalysisError, Dialect
from codeviz.scanner import discover_files


def _keys(files):
    return [f.key for f in files]


def test_discovers_fixture_project(fixture_project):
    keys = _keys(discover_files(fixture_project))
    assert keys == [
        "src/App.jsx",
        "src/broken.js",
        "src/components/Header.tsx",
        "src/index.js",
        "src/store/index.ts",
        "src/util.js",
    ]


def test_skips_node_modules(fixture_project):
    keys = _keys(discover_files(fixture_project))
    assert not any(k.startswith("node_modules/") for k in keys)


def test_filters_by_extension(make_project):
    root = make_project({
        "a.js": "",
        "b.ts": "",
        "c.css": "",
        "d.json": "{}",
        "README.md": "",
    })
    assert _keys(discover_files(root)) == ["a.js", "b.ts"]


def test_custom_extensions_and_excludes(make_project):
    root = make_project({
        "a.js": "",
        "lib/b.mjs": "",
        "vendor/c.js": "",
        "build-1/d.js": "",
    })
    config = AnalysisConfig(
        source_extensions=("js", ".mjs"),
        excluded_dir_names=("vendor", "build-*"),
    )
    assert _keys(discover_files(root, config)) == ["a.js", "lib/b.mjs"]


def test_dialect_assigned(make_project):
    root = make_project({"a.jsx": "", "b.ts": "", "c.tsx": ""})
    by_key = {f.key: f for f in discover_files(root)}
    assert by_key["a.jsx"].dialect == Dialect.JAVASCRIPT
    assert by_key["b.ts"].dialect == Dialect.TYPESCRIPT
    assert by_key["c.tsx"].dialect == Dialect.TSX
    assert by_key["c.tsx"].label == "c.tsx"


def test_keys_use_forward_slashes(make_project):
    root = make_project({"deep/er/file.js": ""})
    (f,) = discover_files(root)
    assert f.key == "deep/er/file.js"
    assert f.label == "file.js"
    assert f.path == (root / "deep" / "er" / "file.js").resolve()


def test_max_depth_bounds_descent(make_project):
    root = make_project({
        "top.js": "",
        "a/one.js": "",
        "a/b/two.js": "",
    })
    assert _keys(discover_files(root, AnalysisConfig(max_depth=0))) == ["top.js"]
    assert _keys(discover_files(root, AnalysisConfig(max_depth=1))) == ["a/one.js", "top.js"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlink_loop_terminates(make_project):
    root = make_project({"a/file.js": ""})
    try:
        os.symlink(root, root / "a" / "loop", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")
    assert _keys(discover_files(root)) == ["a/file.js"]


def test_missing_root_is_fatal(tmp_path):
    with pytest.raises(AnalysisError):
        discover_files(tmp_path / "does-not-exist")


def test_file_root_is_fatal(make_project):
    root = make_project({"a.js": ""})
    with pytest.raises(AnalysisError):
        discover_files(root / "a.js")


def test_empty_directory(tmp_path):
    assert discover_files(tmp_path) == []


def test_invalid_config():
    with pytest.raises(ValueError):
        AnalysisConfig(max_depth=-1)
    with pytest.raises(ValueError):
        AnalysisConfig(workers=0)
