"""Line-oriented import extraction.

No tokenizer: commented-out or templated ``import`` lines are picked up too.
"""

from collections.abc import Iterator

from .locator import is_multiline


def extract_import_lines(text: str, follow_multiline: bool = True) -> Iterator[str]:
    """Yield candidate import statements in source order.

    A line is a candidate when it starts with ``import``. Lines keep their
    terminators. With ``follow_multiline``, an ``import {`` opener is joined
    with the following lines up to the first one containing ``}`` so the
    locator after ``from`` ends up as the last token. An opener that reaches
    another ``import`` line first is yielded alone.
    """
    lines = text.splitlines(keepends=True)
    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if not line.startswith("import"):
            continue

        if not (follow_multiline and is_multiline(line)):
            yield line
            continue

        end = _closing_line(lines, i)
        if end is None:
            yield line
            continue

        yield "".join(lines[i - 1 : end + 1])
        i = end + 1


def _closing_line(lines: list[str], start: int):
    """Index of the first line from ``start`` containing ``}``, or None.

    None when an ``import`` line or the end of text comes first.
    """
    for j in range(start, len(lines)):
        if lines[j].startswith("import"):
            return None
        if "}" in lines[j]:
            return j
    return None
