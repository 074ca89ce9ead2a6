"""Tests for scanning/locator.py."""

import pytest

from import_diagram.exceptions import ParseError
from import_diagram.scanning.locator import ImportLine, is_multiline, parse_locator


class TestParseLocator:
    @pytest.mark.parametrize(
        "line",
        [
            'import X from "./a/b";\n',
            "import X from './a/b';\n",
            "import X from './a/b'\n",
            'import X from "./a/b"',
        ],
    )
    def test_default_import_quote_style_irrelevant(self, line):
        assert parse_locator(line) == "./a/b"

    def test_side_effect_import(self):
        assert parse_locator('import "./polyfills";\n') == "./polyfills"

    def test_named_imports_on_one_line(self):
        assert parse_locator("import { a, b } from 'lodash';\n") == "lodash"

    def test_scoped_package(self):
        assert parse_locator('import x from "@fortawesome/fontawesome-svg-core";') == (
            "@fortawesome/fontawesome-svg-core"
        )

    def test_only_one_semicolon_stripped(self):
        assert parse_locator('import x from "./a";;\n') == "./a;"

    def test_crlf_line(self):
        assert parse_locator('import x from "./a";\r\n') == "./a"

    def test_no_whitespace_is_parse_error(self):
        with pytest.raises(ParseError) as exc:
            parse_locator("import\n")
        assert "no whitespace" in exc.value.reason

    def test_empty_locator_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_locator('import "";\n')

    def test_destructured_opening_line_yields_brace(self):
        # Only the first line of a multi-line import; the last token is "{".
        assert parse_locator("import {\n") == "{"


class TestIsMultiline:
    def test_opening_brace_line(self):
        assert is_multiline("import {\n")

    def test_crlf_opening_brace_line(self):
        assert is_multiline("import {\r\n")

    def test_single_line_import(self):
        assert not is_multiline("import { a } from './a';\n")

    def test_brace_without_newline(self):
        assert not is_multiline("import {")


class TestImportLine:
    def test_parse_single_line(self):
        line = ImportLine.parse("import React from 'react';\n")
        assert line.locator == "react"
        assert not line.multiline

    def test_parse_joined_statement(self):
        line = ImportLine.parse("import {\n  a,\n  b,\n} from './things';\n")
        assert line.locator == "./things"
        assert line.multiline
