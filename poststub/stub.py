"""Post stub model and error types.

A post stub is the skeleton of a blog entry: one Markdown file whose front
matter holds the title, date, tags and categories, with an empty body.

Key classes:
- PostStub: The values rendered into a new post file.
- PostStubError: Base class for every error raised by poststub.
- InvalidInput: Operator input that cannot be used (e.g. empty filename).
- WriteFailure: The directory or file could not be written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from .utils import normalize_filename, today_string


class PostStubError(Exception):
    """Base class for poststub errors."""


class InvalidInput(PostStubError):
    """Operator input was rejected before anything was written."""


class WriteFailure(PostStubError):
    """Error while creating the target directory or writing the post file.

    Attributes:
        path: Path that could not be written.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.path = path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{path}: {message}")


@dataclass
class PostStub:
    """Values for a new post file.

    Attributes:
        filename: Base name of the file, also used as the post title.
        date: Post date in YYYY-MM-DD form.
        tags: Tags emitted in the front matter (always empty when scaffolding).
        categories: Categories emitted in the front matter.
    """

    filename: str
    date: str
    tags: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.filename

    @property
    def file_name(self) -> str:
        return f"{self.filename}.md"


def make_stub(filename: str | None, now: date | datetime | None = None) -> PostStub:
    """Build a PostStub from operator input and the current date.

    Args:
        filename: Filename as supplied by the operator.
        now: Optional date to use instead of the host clock.

    Returns:
        A PostStub with an empty tag and category list.

    Raises:
        InvalidInput: If the filename is empty.
    """
    name = normalize_filename(filename)
    if not name:
        raise InvalidInput("Filename cannot be empty")
    return PostStub(filename=name, date=today_string(now))
