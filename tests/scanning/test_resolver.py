"""Tests for scanning/resolver.py."""

import os

from import_diagram.scanning.resolver import (
    LocalPathResolver,
    candidate_paths,
    resolve_local_path,
)


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")
    return str(path)


class TestCandidatePaths:
    def test_relative_uses_importer_directory(self, tmp_path):
        importer = str(tmp_path / "src" / "app.ts")
        assert candidate_paths("./util", importer, "/elsewhere", ["js", "ts"]) == [
            str(tmp_path / "src" / "util.js"),
            str(tmp_path / "src" / "util.ts"),
        ]

    def test_parent_relative_is_normalised(self, tmp_path):
        importer = str(tmp_path / "src" / "pages" / "home.js")
        assert candidate_paths("../api", importer, "/elsewhere", ["js"]) == [
            str(tmp_path / "src" / "api.js")
        ]

    def test_project_rooted_uses_base_dir(self, tmp_path):
        importer = str(tmp_path / "src" / "deep" / "x.js")
        base = str(tmp_path / "src")
        assert candidate_paths("components/Button", importer, base, ["jsx"]) == [
            os.path.join(base, "components", "Button.jsx")
        ]

    def test_explicit_extension_is_sole_candidate(self, tmp_path):
        importer = str(tmp_path / "app.ts")
        assert candidate_paths("./style.css", importer, "/x", ["js", "ts"]) == [
            str(tmp_path / "style.css")
        ]


class TestResolveLocalPath:
    def test_second_extension_found(self, tmp_path):
        importer = _touch(tmp_path / "proj" / "src" / "app.ts")
        util_ts = _touch(tmp_path / "proj" / "src" / "util.ts")
        assert resolve_local_path("./util", importer, "/unused", ["js", "ts"]) == util_ts

    def test_extension_order_decides(self, tmp_path):
        importer = _touch(tmp_path / "app.ts")
        util_js = _touch(tmp_path / "util.js")
        _touch(tmp_path / "util.ts")
        assert resolve_local_path("./util", importer, "/unused", ["js", "ts"]) == util_js

    def test_none_when_missing(self, tmp_path):
        importer = _touch(tmp_path / "proj" / "src" / "app.ts")
        assert resolve_local_path("./util", importer, "/unused", ["js", "ts"]) is None

    def test_directory_index_not_resolved(self, tmp_path):
        importer = _touch(tmp_path / "app.js")
        _touch(tmp_path / "widgets" / "index.js")
        assert resolve_local_path("./widgets", importer, "/unused", ["js"]) is None

    def test_explicit_extension_existing(self, tmp_path):
        importer = _touch(tmp_path / "app.js")
        data = _touch(tmp_path / "data.json")
        assert resolve_local_path("./data.json", importer, "/unused", ["js"]) == data

    def test_directory_with_dotted_name_is_not_a_file(self, tmp_path):
        importer = _touch(tmp_path / "app.js")
        (tmp_path / "lib.v2").mkdir()
        assert resolve_local_path("./lib.v2", importer, "/unused", ["js"]) is None


class TestLocalPathResolver:
    def test_components_prefix_from_base_dir(self, tmp_path):
        base = tmp_path / "app" / "javascript"
        importer = _touch(base / "packs" / "application.js")
        button = _touch(base / "components" / "Button.jsx")
        resolver = LocalPathResolver(str(base), ["js", "jsx"])
        assert resolver.resolve("components/Button", importer) == button
