"""Tests for scanning/extractor.py."""

import types

from import_diagram.scanning.extractor import extract_import_lines

SOURCE = """\
import React from "react";
import { a, b } from './ab';
const x = 1;
  import indented from "./indented";
// import commented from "./commented";
import "./side-effect";
export default x;
"""


class TestExtractImportLines:
    def test_is_lazy(self):
        assert isinstance(extract_import_lines(SOURCE), types.GeneratorType)

    def test_source_order_and_terminators(self):
        assert list(extract_import_lines(SOURCE)) == [
            'import React from "react";\n',
            "import { a, b } from './ab';\n",
            'import "./side-effect";\n',
        ]

    def test_leading_whitespace_not_stripped(self):
        lines = list(extract_import_lines(SOURCE))
        assert not any("indented" in line for line in lines)

    def test_empty_text(self):
        assert list(extract_import_lines("")) == []

    def test_last_line_without_newline(self):
        assert list(extract_import_lines("import x from './x'")) == ["import x from './x'"]

    def test_prefix_match_accepts_false_positives(self):
        # Line heuristic: anything starting with "import" is a candidate.
        assert list(extract_import_lines("importScripts('a.js');\n")) == [
            "importScripts('a.js');\n"
        ]


class TestMultilineImports:
    TEXT = "import {\n  one,\n  two,\n} from './numbers';\nimport z from './z';\n"

    def test_followed_to_closing_brace(self):
        assert list(extract_import_lines(self.TEXT)) == [
            "import {\n  one,\n  two,\n} from './numbers';\n",
            "import z from './z';\n",
        ]

    def test_opening_line_only_when_disabled(self):
        assert list(extract_import_lines(self.TEXT, follow_multiline=False)) == [
            "import {\n",
            "import z from './z';\n",
        ]

    def test_unterminated_block_at_end_yields_opener(self):
        assert list(extract_import_lines("import {\n  a,\n")) == ["import {\n"]

    def test_unterminated_block_stops_at_next_import(self):
        text = "import {\n  a,\nimport b from './b';\nimport {\n  c } from './c';\n"
        assert list(extract_import_lines(text)) == [
            "import {\n",
            "import b from './b';\n",
            "import {\n  c } from './c';\n",
        ]
