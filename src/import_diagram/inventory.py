"""Source file inventory: which files under the scan roots get analyzed.

By default only files tracked by git are listed, via ``git ls-files``.
Untracked mode walks the filesystem instead.
"""

import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

from .exceptions import InventoryError
from .file_ops import should_skip_file
from .logging_config import get_logger

logger = get_logger(__name__)


class GitFileLister:
    """List git-tracked files below one directory."""

    def __init__(self, directory: str, timeout: int = 60):
        self.directory = Path(directory).resolve()
        self.timeout = timeout

    def list_files(self, extensions: Sequence[str]) -> list[str]:
        """Absolute paths of tracked files with one of ``extensions``.

        Raises:
            InventoryError: If git is unavailable or the directory is not
                inside a work tree.
        """
        if not self.directory.is_dir():
            raise InventoryError(self.directory, "not a directory")

        raw = self._run_ls_files()
        suffixes = {f".{ext}" for ext in extensions}

        files = []
        for rel in raw.split("\0"):
            if not rel:
                continue
            path = self.directory / rel
            if path.suffix in suffixes and path.is_file():
                files.append(str(path))

        logger.debug("git ls-files: %d matching files in %s", len(files), self.directory)
        return files

    def _run_ls_files(self) -> str:
        cmd = ["git", "-C", str(self.directory), "ls-files", "-z", "--cached"]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise InventoryError(self.directory, "git executable not found")
        except subprocess.TimeoutExpired:
            raise InventoryError(self.directory, f"git ls-files timed out after {self.timeout}s")

        if result.returncode != 0:
            raise InventoryError(self.directory, result.stderr.strip() or "git ls-files failed")
        return result.stdout


def walk_files(
    directory: str, extensions: Sequence[str], exclude_patterns: Iterable[str] = ()
) -> list[str]:
    """Absolute paths of files below ``directory`` with one of ``extensions``."""
    root = Path(directory).resolve()
    if not root.is_dir():
        raise InventoryError(root, "not a directory")

    suffixes = {f".{ext}" for ext in extensions}
    patterns = tuple(exclude_patterns)

    files = []
    skipped = 0
    for path in root.rglob("*"):
        if path.suffix not in suffixes or not path.is_file():
            continue
        if should_skip_file(path, patterns, root):
            skipped += 1
            continue
        files.append(str(path))

    logger.debug("Walked %s: %d files, %d excluded", root, len(files), skipped)
    return files


def list_source_files(
    dirs: Iterable[str],
    extensions: Sequence[str],
    tracked_only: bool = True,
    exclude_patterns: Iterable[str] = (),
    timeout: int = 60,
) -> list[str]:
    """Sorted, deduplicated absolute paths of the files to analyze.

    Args:
        dirs: Scan roots
        extensions: Extensions without the dot
        tracked_only: List git-tracked files only
        exclude_patterns: Globs skipped when walking (ignored for git)
        timeout: Seconds allowed per git call
    """
    found: set[str] = set()
    for directory in dirs:
        if tracked_only:
            found.update(GitFileLister(directory, timeout=timeout).list_files(extensions))
        else:
            found.update(walk_files(directory, extensions, exclude_patterns))

    files = sorted(found)
    logger.info("Inventory: %d source files", len(files))
    return files
