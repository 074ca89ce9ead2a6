"""Import scanning: extraction, locator parsing, classification, resolution."""

from .classifier import LocatorClassifier
from .extractor import extract_import_lines
from .locator import ImportLine, is_multiline, parse_locator
from .resolver import LocalPathResolver, resolve_local_path

__all__ = [
    "ImportLine",
    "LocalPathResolver",
    "LocatorClassifier",
    "extract_import_lines",
    "is_multiline",
    "parse_locator",
    "resolve_local_path",
]
