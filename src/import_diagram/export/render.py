"""Hand the DOT description to an external Graphviz binary."""

import shlex
import subprocess
from pathlib import Path

from ..exceptions import RenderError
from ..file_ops import write_text
from ..logging_config import get_logger

logger = get_logger(__name__)


def write_dot(text: str, dot_path: Path) -> Path:
    write_text(dot_path, text)
    logger.info("Graph description written to %s", dot_path)
    return dot_path


def render_command(
    dot_path: Path, image_path: Path, engine: str = "dot", command: str = "dot"
) -> list[str]:
    """``dot -T<format> -K<engine> <input> -o <output>``; format from the image suffix."""
    fmt = image_path.suffix.removeprefix(".")
    if not fmt:
        raise RenderError(f"cannot infer image format from {image_path}")
    return [command, f"-T{fmt}", f"-K{engine}", str(dot_path), "-o", str(image_path)]


def render_image(
    dot_path: Path,
    image_path: Path,
    engine: str = "dot",
    command: str = "dot",
    timeout: int = 60,
) -> Path:
    """Run the layout engine and return the image path.

    Raises:
        RenderError: If the binary is missing, times out, or exits non-zero.
    """
    cmd = render_command(dot_path, image_path, engine=engine, command=command)
    cmd_str = shlex.join(cmd)
    logger.debug("Running %s", cmd_str)

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        raise RenderError(f"{command!r} not found; install Graphviz", command=cmd_str)
    except subprocess.TimeoutExpired:
        raise RenderError(f"timed out after {timeout}s", command=cmd_str)

    if result.returncode != 0:
        raise RenderError(
            result.stderr.strip() or f"exit status {result.returncode}", command=cmd_str
        )

    logger.info("Image written to %s", image_path)
    return image_path
