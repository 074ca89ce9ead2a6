"""Resolve local import locators to files on disk.

Only extensions are appended to the locator itself. Directory imports that
rely on an ``index.<ext>`` file are not resolved.
"""

import os
from collections.abc import Sequence
from typing import Optional

from ..logging_config import get_logger

logger = get_logger(__name__)


def candidate_paths(
    locator: str, importer_path: str, base_dir: str, extensions: Sequence[str]
) -> list[str]:
    """Absolute paths to probe for ``locator``, in probing order."""
    if locator.startswith("."):
        anchor = os.path.dirname(importer_path)
    else:
        anchor = base_dir

    if os.path.splitext(locator)[1]:
        names = [locator]
    else:
        names = [f"{locator}.{ext}" for ext in extensions]

    return [os.path.normpath(os.path.join(anchor, name)) for name in names]


def resolve_local_path(
    locator: str, importer_path: str, base_dir: str, extensions: Sequence[str]
) -> Optional[str]:
    """Return the first existing file the locator can refer to, or None.

    Args:
        locator: Local locator, e.g. ``./util`` or ``components/Button``
        importer_path: Absolute path of the importing file
        base_dir: Base for locators that do not start with ``.``
        extensions: Extensions (no dot) tried in order when the locator has none
    """
    for candidate in candidate_paths(locator, importer_path, base_dir, extensions):
        if os.path.isfile(candidate):
            return candidate

    logger.debug("Unresolved local import %s from %s", locator, importer_path)
    return None


class LocalPathResolver:
    """resolve_local_path bound to a base directory and extension order."""

    def __init__(self, base_dir: str, extensions: Sequence[str]):
        self.base_dir = base_dir
        self.extensions = tuple(extensions)

    def resolve(self, locator: str, importer_path: str) -> Optional[str]:
        return resolve_local_path(locator, importer_path, self.base_dir, self.extensions)
