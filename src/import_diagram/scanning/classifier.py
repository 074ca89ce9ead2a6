"""Locator classification: local file, known library, or neither."""

from collections.abc import Iterable
from typing import Optional

from ..config import KNOWN_LIBRARIES, LOCAL_PREFIXES
from ..graph.models import ImportKind


class LocatorClassifier:
    """Closed-world classifier for import locators.

    Rules, in order:
      1. local if the locator starts with one of ``local_prefixes``
      2. library if it is scoped (``@...``), is a known library name, or
         is a sub-path of one (``lodash/fp``)
      3. otherwise unclassified
    """

    def __init__(
        self,
        known_libraries: Iterable[str] = KNOWN_LIBRARIES,
        local_prefixes: Iterable[str] = LOCAL_PREFIXES,
    ):
        self.known_libraries = frozenset(known_libraries)
        self.local_prefixes = tuple(local_prefixes)
        self._library_prefixes = tuple(f"{lib}/" for lib in sorted(self.known_libraries))

    def is_local(self, locator: str) -> bool:
        return locator.startswith(self.local_prefixes)

    def is_library(self, locator: str) -> bool:
        if self.is_local(locator):
            return False
        if locator.startswith("@"):
            return True
        if locator in self.known_libraries:
            return True
        return locator.startswith(self._library_prefixes)

    def classify(self, locator: str) -> Optional[ImportKind]:
        """Return LOCAL, LIBRARY, or None for an unclassified locator."""
        if self.is_local(locator):
            return ImportKind.LOCAL
        if self.is_library(locator):
            return ImportKind.LIBRARY
        return None
