"""Data models for Obsidian postprocessors."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class PostprocessorResult(Enum):
    """Outcome of running a postprocessor over a note."""

    CONTINUE = "continue"
    STOP_AND_SKIP_NOTE = "stop_and_skip_note"


class Event:
    """Base class for markdown structural events."""


@dataclass(frozen=True)
class Start(Event):
    tag: str


@dataclass(frozen=True)
class End(Event):
    tag: str


@dataclass(frozen=True)
class Text(Event):
    text: str


@dataclass(frozen=True)
class Code(Event):
    text: str


@dataclass(frozen=True)
class Html(Event):
    html: str


@dataclass(frozen=True)
class SoftBreak(Event):
    pass


@dataclass(frozen=True)
class HardBreak(Event):
    pass


@dataclass(frozen=True)
class Rule(Event):
    pass


@dataclass(frozen=True)
class Link(Event):
    url: str
    title: str = ""


@dataclass(frozen=True)
class Image(Event):
    url: str
    title: str = ""


MarkdownEvents = List[Event]


@dataclass
class NoteError:
    """A recoverable error that occurred while postprocessing a note.

    The note is still exported; the error is reported alongside it.
    """
    path: Path
    error: str
    title: Optional[str] = None


class AssetWriteError(Exception):
    """Copying a referenced asset next to the exported note failed."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"Failed to copy {path}: {message}")
        self.path = path


class Context:
    """Per-note state shared by every postprocessor in a chain.

    ``current_file`` is fixed for the lifetime of the context. ``destination``
    starts as the exporter's default output path and may be rewritten.
    """

    def __init__(
        self,
        current_file: Path,
        destination: Path,
        frontmatter: Optional[Dict[str, Any]] = None,
    ):
        self._current_file = Path(current_file)
        self.destination = Path(destination)
        self.frontmatter: Dict[str, Any] = frontmatter if frontmatter is not None else {}
        self.errors: List[NoteError] = []

    @property
    def current_file(self) -> Path:
        """Path of the note being processed."""
        return self._current_file

    def tags(self) -> List[str]:
        """String tags declared in the frontmatter, in declaration order.

        Anything other than a list under ``tags`` counts as no tags.
        """
        tags = self.frontmatter.get('tags')
        if not isinstance(tags, list):
            return []
        return [tag for tag in tags if isinstance(tag, str)]

    def __repr__(self) -> str:
        return (
            f"Context(current_file={self._current_file!r}, "
            f"destination={self.destination!r})"
        )
