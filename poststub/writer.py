"""Writing post stubs to disk.

Key names:
- ExistsPolicy: What to do when the target file already exists.
- write_stub: Create the target directory and write a rendered stub into it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .stub import PostStub, WriteFailure
from .templates import render_front_matter
from .utils import ensure_directory


class ExistsPolicy(str, Enum):
    """Handling of a post file that is already on disk."""

    FAIL = "fail"
    OVERWRITE = "overwrite"
    APPEND = "append"

    @classmethod
    def choices(cls) -> list[str]:
        return [policy.value for policy in cls]


_OPEN_MODES = {
    ExistsPolicy.FAIL: "x",
    ExistsPolicy.OVERWRITE: "w",
    ExistsPolicy.APPEND: "a",
}


def target_path(directory: Path, stub: PostStub) -> Path:
    """Return the path a stub is written to inside a directory."""
    return directory / stub.file_name


def write_stub(
    directory: Path,
    stub: PostStub,
    on_exists: ExistsPolicy = ExistsPolicy.FAIL,
) -> Path:
    """Write a post stub to `<directory>/<filename>.md`.

    The directory and its parents are created first if missing.

    Args:
        directory: Directory that receives the post file.
        stub: Post values to render.
        on_exists: Behaviour when the file already exists.

    Returns:
        Path of the written file.

    Raises:
        WriteFailure: If the directory or the file could not be written,
            including an existing file under ExistsPolicy.FAIL.
    """
    try:
        ensure_directory(directory)
    except (OSError, ValueError) as exc:
        raise WriteFailure(directory, _describe(exc), exc) from exc

    path = target_path(directory, stub)
    content = render_front_matter(stub)
    mode = _OPEN_MODES[ExistsPolicy(on_exists)]
    try:
        with open(path, mode, encoding="utf-8", newline="\n") as f:
            f.write(content)
    except FileExistsError as exc:
        raise WriteFailure(path, "File already exists", exc) from exc
    except (OSError, ValueError) as exc:
        # ValueError: embedded null byte in the path
        raise WriteFailure(path, _describe(exc), exc) from exc
    return path


def _describe(exc: Exception) -> str:
    """Return the OS message of an error without the repeated filename."""
    return getattr(exc, "strerror", None) or str(exc)
