"""Tests for graph/builder.py."""

import logging

import pytest

from import_diagram.config import DiagramConfig
from import_diagram.exceptions import DuplicateFileError, FileAccessError
from import_diagram.export.dot import export_graph
from import_diagram.graph.builder import GraphBuilder, build_dependency_graph
from import_diagram.graph.models import ImportKind
from import_diagram.inventory import list_source_files

from conftest import write_tree


def _build(config, paths):
    return build_dependency_graph(sorted(paths.values()), config)


class TestBuildDependencyGraph:
    def test_empty_inventory(self, project):
        config, _ = project({})
        graph = build_dependency_graph([], config)
        assert len(graph) == 0
        assert graph.edges == []

    def test_side_effect_import_between_two_files(self, project):
        config, paths = project({"a.ts": 'import "./b";\n', "b.ts": "export const b = 1;\n"})
        graph = _build(config, paths)

        assert [f.rel_path for f in graph.files] == ["a.ts", "b.ts"]
        [edge] = graph.edges
        assert edge.kind is ImportKind.LOCAL
        assert graph.get_file(edge.importer_id).rel_path == "a.ts"
        assert graph.get_file(edge.target_id).rel_path == "b.ts"
        assert edge.target_path == paths["b.ts"]

        dot = export_graph(graph)
        assert dot.count("->") == 1
        assert f"n{edge.importer_id} -> n{edge.target_id};" in dot

    def test_library_import_kept_in_model_not_drawn(self, project):
        config, paths = project({"a.js": "import _ from 'lodash';\n"})
        graph = _build(config, paths)

        [edge] = graph.edges
        assert edge.locator == "lodash"
        assert edge.kind is ImportKind.LIBRARY
        assert edge.target_id is None
        assert edge.target_path is None
        assert "->" not in export_graph(graph)

    def test_unclassified_locator_has_no_kind(self, project):
        config, paths = project({"a.js": "import axios from 'axios';\n"})
        [edge] = _build(config, paths).edges
        assert edge.kind is None
        assert edge.target_path is None

    def test_unresolved_local_recorded_without_target(self, project):
        config, paths = project({"a.js": "import x from './missing';\n"})
        [edge] = _build(config, paths).edges
        assert edge.kind is ImportKind.LOCAL
        assert edge.target_id is None
        assert edge.target_path is None

    def test_resolved_outside_inventory_keeps_path(self, project):
        config, paths = project({"a.js": "import x from './b';\n", "b.js": ""})
        graph = build_dependency_graph([paths["a.js"]], config)
        [edge] = graph.edges
        assert edge.target_path == paths["b.js"]
        assert edge.target_id is None

    def test_import_of_later_file_resolves(self, project):
        config, paths = project({"a.js": "import z from './z';\n", "z.js": ""})
        [edge] = _build(config, paths).edges
        assert edge.target_id == 2

    def test_components_prefix_resolves_from_scan_dir(self, project):
        config, paths = project(
            {
                "app/javascript/packs/app.js": "import Button from 'components/Button';\n",
                "app/javascript/components/Button.jsx": "export default 1;\n",
            },
            scan_dirs=["app/javascript"],
        )
        graph = _build(config, paths)
        [edge] = graph.edges
        assert graph.get_file(edge.target_id).rel_path == "app/javascript/components/Button.jsx"

    def test_mutual_imports(self, project):
        config, paths = project(
            {"a.js": "import b from './b';\n", "b.js": "import a from './a';\n"}
        )
        graph = _build(config, paths)
        assert len(graph.edges_with_resolved_target()) == 2
        dot = export_graph(graph)
        assert "n1 -> n2;" in dot
        assert "n2 -> n1;" in dot

    def test_duplicate_import_recorded_once(self, project):
        config, paths = project(
            {"a.js": "import x from './b';\nimport y from './b';\n", "b.js": ""}
        )
        builder = GraphBuilder(config)
        graph = builder.build(sorted(paths.values()))
        assert len(graph.edges) == 1
        assert builder.duplicate_imports == 1

    def test_malformed_line_skipped(self, project, caplog):
        config, paths = project({"a.js": "import\nimport r from 'react';\n"})
        builder = GraphBuilder(config)
        with caplog.at_level(logging.WARNING, logger="import_diagram"):
            graph = builder.build(sorted(paths.values()))
        assert [e.locator for e in graph.edges] == ["react"]
        assert builder.skipped_lines == 1
        assert "a.js" in caplog.text

    def test_multiline_import_followed(self, project):
        config, paths = project(
            {
                "a.ts": "import {\n  one,\n  two,\n} from './nums';\n",
                "nums.ts": "export const one = 1, two = 2;\n",
            }
        )
        graph = _build(config, paths)
        [edge] = graph.edges
        assert edge.locator == "./nums"
        assert edge.target_id == 2

    def test_multiline_import_opening_line_only(self, project):
        config, paths = project(
            {"a.ts": "import {\n  one,\n} from './nums';\n", "nums.ts": ""},
            follow_multiline=False,
        )
        [edge] = _build(config, paths).edges
        assert edge.locator == "{"
        assert edge.kind is None

    def test_duplicate_inventory_path_is_fatal(self, project):
        config, paths = project({"a.js": ""})
        with pytest.raises(DuplicateFileError):
            build_dependency_graph([paths["a.js"], paths["a.js"]], config)

    def test_unreadable_file_is_fatal(self, project, tmp_path):
        config, _ = project({})
        with pytest.raises(FileAccessError):
            build_dependency_graph([str(tmp_path / "nope.js")], config)

    def test_idempotent(self, project):
        config, paths = project(
            {
                "src/a.ts": "import b from './b';\nimport _ from 'lodash';\n",
                "src/b.ts": "import a from './a';\nimport c from '../c';\n",
                "c.tsx": "import React from 'react';\n",
            }
        )

        def snapshot(graph):
            nodes = {(f.base_name, f.rel_path) for f in graph.files}
            edges = {
                (
                    e.importer_path,
                    e.locator,
                    e.kind,
                    graph.get_file(e.target_id).rel_path if e.target_id else None,
                )
                for e in graph.edges
            }
            return nodes, edges

        first = _build(config, paths)
        second = _build(config, paths)
        assert snapshot(first) == snapshot(second)
        assert export_graph(first) == export_graph(second)


class TestSymlinkedProjectRoot:
    @pytest.fixture
    def linked_config(self, tmp_path):
        write_tree(
            tmp_path / "real",
            {
                "app.js": "import Button from 'components/Button';\nimport c from './c';\n",
                "c.js": "export default 1;\n",
                "components/Button.js": "export default 2;\n",
            },
        )
        (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)
        return DiagramConfig(project_root=str(tmp_path / "link"), tracked_only=False)

    def _graph(self, config):
        paths = list_source_files(config.scan_dirs, config.extensions, tracked_only=False)
        return build_dependency_graph(paths, config)

    def test_relative_paths_inside_root(self, linked_config):
        graph = self._graph(linked_config)
        assert [f.rel_path for f in graph.files] == ["app.js", "c.js", "components/Button.js"]

    def test_every_local_import_reaches_its_file(self, linked_config):
        graph = self._graph(linked_config)
        targets = {e.locator: graph.get_file(e.target_id).rel_path for e in graph.edges}
        assert targets == {"components/Button": "components/Button.js", "./c": "c.js"}
        assert export_graph(graph).count("->") == 2
