"""Locator parsing: the module-reference string of one import statement.

This is a heuristic, not a grammar. The locator is assumed to be the last
whitespace-delimited token, which holds for ``import X from "locator";``
and ``import "locator";``.
"""

from dataclasses import dataclass

from ..exceptions import ParseError

_QUOTES = str.maketrans("", "", "'\"")


def parse_locator(line: str) -> str:
    """Extract the locator from a raw import line.

    Raises:
        ParseError: If the line has no whitespace-separated locator token
            or the token is empty once quotes are removed.
    """
    tokens = line.split()
    if len(tokens) < 2:
        raise ParseError(line, "no whitespace-delimited locator token")

    token = tokens[-1]
    token = token.removesuffix("\n")
    token = token.removesuffix(";")
    locator = token.translate(_QUOTES)

    if not locator:
        raise ParseError(line, "empty locator")
    return locator


def is_multiline(line: str) -> bool:
    """True when the line opens an ``import {`` block continued on later lines."""
    return line.endswith("{\n") or line.endswith("{\r\n")


@dataclass(frozen=True)
class ImportLine:
    """A candidate import statement and the locator parsed from it."""

    statement: str
    locator: str
    multiline: bool = False

    @classmethod
    def parse(cls, statement: str) -> "ImportLine":
        return cls(
            statement=statement,
            locator=parse_locator(statement),
            multiline=is_multiline(statement.splitlines(keepends=True)[0]),
        )
