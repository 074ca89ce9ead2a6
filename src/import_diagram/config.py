"""Configuration loading and management for import-diagram.

Configuration sources are merged in priority order:
    1. Defaults (defined in DiagramConfig)
    2. Global config (~/.import-diagram.toml)
    3. Project config (./import-diagram.toml)
    4. Explicit config file
    5. Environment variables (IMPORT_DIAGRAM_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(project_root="/srv/app", scan_dirs=["app/javascript"])
    >>> config.base_dir
    '/srv/app/app/javascript'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "IMPORT_DIAGRAM_"

# Curated allowlist of bare package names treated as libraries. Scoped
# packages (@scope/name) are recognised without being listed here.
KNOWN_LIBRARIES: tuple[str, ...] = (
    "@fortawesome",
    "bootstrap",
    "datatables.net-bs4",
    "datatables.net-buttons-bs4",
    "datatables.net-rowgroup-bs4",
    "flatpickr",
    "immutable",
    "jquery",
    "jquery-ujs",
    "konva",
    "lodash",
    "prop-types",
    "react",
    "react-dom",
    "react-input-mask",
    "react-konva",
    "react-pdf",
    "react-select",
    "select2",
    "tippy.js",
    "webpacker-react",
)

LOCAL_PREFIXES: tuple[str, ...] = ("./", "../", "components")

DEFAULT_EXTENSIONS: tuple[str, ...] = ("js", "jsx", "ts", "tsx")

_TUPLE_FIELDS = (
    "scan_dirs",
    "extensions",
    "known_libraries",
    "local_prefixes",
    "exclude_patterns",
)


@dataclass(frozen=True)
class DiagramConfig:
    """Immutable settings for one diagram run.

    Attributes:
        Project layout:
            project_root: Directory that relative paths are computed against
                (symlinks resolved)
            scan_dirs: Directories to scan (relative entries resolve against
                project_root); the first one is the base for non-relative
                local locators such as ``components/...``
            extensions: Recognised source extensions, without the dot, in
                resolution order

        Classification:
            known_libraries: Bare package names treated as libraries
            local_prefixes: Locator prefixes treated as local files
            follow_multiline: Join ``import {`` statements up to the closing
                brace before extracting the locator

        Inventory:
            tracked_only: Only scan files tracked by git
            exclude_patterns: Glob patterns skipped when walking the
                filesystem (tracked_only=False)

        Outputs:
            database_file: SQLite file, recreated on every run
            dot_file: Graph description written for the layout engine
            image_file: Rendered image; its suffix selects the format
            layout_engine: Graphviz engine passed as ``-K``
            dot_command: Graphviz executable
            link_base: Prefix for node URLs (None = no URL attribute)
            subprocess_timeout_seconds: Timeout for git and dot

        Output control:
            verbosity: Logging verbosity level
    """

    project_root: str = field(default_factory=os.getcwd)
    scan_dirs: tuple[str, ...] = ()
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    known_libraries: tuple[str, ...] = KNOWN_LIBRARIES
    local_prefixes: tuple[str, ...] = LOCAL_PREFIXES
    follow_multiline: bool = True

    tracked_only: bool = True
    exclude_patterns: tuple[str, ...] = (
        "node_modules/*",
        "dist/*",
        "build/*",
        "coverage/*",
        ".git/*",
        "vendor/*",
        "*.min.js",
        "*.bundle.js",
    )

    database_file: str = "diagram.sqlite3"
    dot_file: str = "diagram.dot"
    image_file: str = "diagram.pdf"
    layout_engine: str = "dot"
    dot_command: str = "dot"
    link_base: Optional[str] = None
    subprocess_timeout_seconds: int = 60

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Normalise paths and collections, then validate."""
        for name in _TUPLE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                raise InvalidConfigError(name, value, "expected a list of strings")
            object.__setattr__(self, name, tuple(value))

        # Same path form as the inventory: symlinks resolved.
        root = os.path.realpath(os.path.expanduser(self.project_root))
        object.__setattr__(self, "project_root", root)

        scan_dirs = self.scan_dirs or (root,)
        object.__setattr__(
            self,
            "scan_dirs",
            tuple(os.path.realpath(os.path.join(root, os.path.expanduser(d))) for d in scan_dirs),
        )

        extensions = tuple(ext.lstrip(".") for ext in self.extensions)
        if not extensions or not all(extensions):
            raise InvalidConfigError("extensions", self.extensions, "need at least one extension")
        object.__setattr__(self, "extensions", extensions)

        if not self.local_prefixes or not all(self.local_prefixes):
            raise InvalidConfigError(
                "local_prefixes", self.local_prefixes, "prefixes must be non-empty"
            )
        if self.subprocess_timeout_seconds < 1:
            raise InvalidConfigError(
                "subprocess_timeout_seconds",
                self.subprocess_timeout_seconds,
                "must be at least 1",
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")
        if not Path(self.image_file).suffix:
            raise InvalidConfigError(
                "image_file", self.image_file, "needs a suffix naming the image format"
            )

    @property
    def base_dir(self) -> str:
        """Base directory for project-rooted locators (first scan dir)."""
        return self.scan_dirs[0]

    def output_path(self, name: str) -> Path:
        """Resolve an output file name against the project root."""
        return Path(self.project_root) / name


def load_config(config_file: Optional[Path] = None, **overrides) -> DiagramConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated DiagramConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".import-diagram.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "import-diagram.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return DiagramConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load scalar settings from IMPORT_DIAGRAM_* environment variables.

    e.g. IMPORT_DIAGRAM_PROJECT_ROOT, IMPORT_DIAGRAM_TRACKED_ONLY=false,
    IMPORT_DIAGRAM_IMAGE_FILE=graph.svg. Collection fields are TOML-only.
    """
    type_hints = get_type_hints(DiagramConfig)

    result: dict[str, Any] = {}

    for field_name in DiagramConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"from {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment.
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file; its ``[import-diagram]`` table if present, else the top level."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    return data.get("import-diagram", data)
