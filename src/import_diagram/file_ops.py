"""
Safe file operations for import-diagram.
"""

from fnmatch import fnmatch
from pathlib import Path

from .exceptions import FileAccessError


def read_source(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a source file as text.

    Undecodable bytes are replaced rather than failing the file.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def write_text(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write text, creating parent directories as needed.

    Raises:
        FileAccessError: If the file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")


def should_skip_file(filepath: Path, exclude_patterns: tuple[str, ...], root: Path) -> bool:
    """
    True if the path, relative to root, matches any exclusion pattern.

    ``dir/*`` patterns match the directory at any depth.
    """
    try:
        rel = filepath.relative_to(root)
    except ValueError:
        rel = filepath

    rel_str = rel.as_posix()
    for pattern in exclude_patterns:
        if rel.match(pattern) or fnmatch(rel_str, pattern):
            return True
        if pattern.endswith("/*"):
            dirname = pattern[:-2]
            if dirname in rel.parts[:-1]:
                return True
    return False
