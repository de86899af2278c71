"""Postprocessor that redirects a note's output path from its frontmatter.

A note with an ``export_to`` field is written to that path instead of its
default destination. The path may use two placeholders:

- ``:date`` - the note's ``date`` field (``1970-01-01`` if missing)
- ``:title`` - a slug of the note's ``title`` field (or its file name)

The path is relative to the export root. Images the note references with
relative urls are copied so they sit next to the relocated note.
"""

import logging
import re
import shutil
from enum import Enum
from pathlib import Path

import inflection

from obsidian_postprocessors.core.frontmatter import date_string
from obsidian_postprocessors.core.models import (
    AssetWriteError,
    Context,
    Image,
    MarkdownEvents,
    NoteError,
    PostprocessorResult,
)

logger = logging.getLogger(__name__)

DEFAULT_DATE = "1970-01-01"

# Matches "https://", "http://" and other scheme-prefixed urls
URL_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*://')


class UrlKind(Enum):
    REMOTE = "remote"
    ABSOLUTE_LOCAL = "absolute_local"
    RELATIVE_LOCAL = "relative_local"


def classify_url(url: str) -> UrlKind:
    """Classify an image url by where its target lives."""
    if URL_SCHEME_PATTERN.match(url):
        return UrlKind.REMOTE
    if url.startswith('/'):
        return UrlKind.ABSOLUTE_LOCAL
    return UrlKind.RELATIVE_LOCAL


def shared_root(current_file: Path, destination: Path) -> Path:
    """Find the export root the destination was derived from.

    Walks both paths upward from the leaf while their final components are
    equal, and returns what is left of the destination. With nothing in
    common the template is anchored at the destination's root (``.`` for a
    relative path).

    >>> shared_root(Path("vault/b/note.md"), Path("out/b/note.md"))
    PosixPath('out')
    """
    src_parts = current_file.parts
    dst_parts = destination.parts

    common = 0
    for src_name, dst_name in zip(reversed(src_parts), reversed(dst_parts)):
        if src_name != dst_name or dst_name == destination.anchor:
            break
        common += 1

    if common == 0:
        return Path(destination.anchor)
    return Path(*dst_parts[:len(dst_parts) - common])


def copy_asset(source: Path, target: Path) -> None:
    """Copy source to target, creating target's directory if needed.

    Raises:
        AssetWriteError: if the copy fails
    """
    try:
        shutil.copy(source, target)
        return
    except FileNotFoundError as e:
        if target.parent.exists():
            raise AssetWriteError(source, str(e)) from e
    except OSError as e:
        raise AssetWriteError(source, str(e)) from e

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy(source, target)
    except OSError as e:
        raise AssetWriteError(source, str(e)) from e


class DestinationFromFrontmatter:
    """Rewrite the note destination from its ``export_to`` frontmatter field."""

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Redirect the note and copy its relative images.

        Copy failures are recorded on context.errors; the note is still
        exported.

        Args:
            context: Per-note context, its destination is rewritten
            events: Markdown events, scanned for images but not modified

        Returns:
            Always CONTINUE
        """
        export_to = context.frontmatter.get('export_to')
        if not isinstance(export_to, str):
            return PostprocessorResult.CONTINUE

        date = date_string(context.frontmatter.get('date')) or DEFAULT_DATE
        title = context.frontmatter.get('title')
        if not isinstance(title, str):
            title = context.current_file.stem
        slug = inflection.parameterize(title)

        root = shared_root(context.current_file, context.destination)
        target = export_to.replace(':date', date).replace(':title', slug)
        context.destination = root / target
        logger.debug("Redirecting %s to %s", context.current_file, context.destination)

        self._relocate_images(context, events, title)
        return PostprocessorResult.CONTINUE

    def _relocate_images(self, context: Context, events: MarkdownEvents, title: str) -> None:
        source_dir = context.current_file.parent
        target_dir = context.destination.parent

        for event in events:
            if not isinstance(event, Image):
                continue
            if classify_url(event.url) is not UrlKind.RELATIVE_LOCAL:
                continue

            try:
                copy_asset(source_dir / event.url, target_dir / event.url)
            except AssetWriteError as e:
                context.errors.append(NoteError(path=e.path, error=str(e), title=title))

    def __repr__(self) -> str:
        return "DestinationFromFrontmatter()"
