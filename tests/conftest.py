"""Shared fixtures for import-diagram tests."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from import_diagram.config import DiagramConfig


def write_tree(root: Path, files: dict[str, str]) -> dict[str, str]:
    """Create ``files`` (relative path -> content) under root; return real abs paths."""
    paths = {}
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        paths[rel] = os.path.realpath(path)
    return paths


@pytest.fixture
def project(tmp_path):
    """Factory: write a source tree and return (config, {rel: abs_path})."""

    def _make(files: dict[str, str], **overrides) -> tuple[DiagramConfig, dict[str, str]]:
        paths = write_tree(tmp_path, files)
        overrides.setdefault("tracked_only", False)
        config = DiagramConfig(project_root=str(tmp_path), **overrides)
        return config, paths

    return _make


@pytest.fixture
def git_repo(tmp_path):
    """An initialised git repository in tmp_path; skips without git."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    return tmp_path


@pytest.fixture
def git_add(git_repo):
    """Stage files in the git_repo fixture so ``git ls-files`` lists them."""

    def _add(*rel_paths: str) -> None:
        subprocess.run(["git", "-C", str(git_repo), "add", *rel_paths], check=True)

    return _add
