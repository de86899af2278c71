"""Frontmatter decoding and note context construction."""

import datetime
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from obsidian_postprocessors.core.models import Context

logger = logging.getLogger(__name__)


def _split(content: str) -> Optional[list]:
    if not content.startswith('---'):
        return None

    parts = content.split('---\n', 2)
    if len(parts) < 3:
        return None
    return parts


def parse_frontmatter(content: str) -> Dict[str, Any]:
    """Parse YAML frontmatter from markdown content.

    Args:
        content: Full note content including frontmatter

    Returns:
        Frontmatter dict (empty if not found or invalid)
    """
    parts = _split(content)
    if parts is None:
        return {}

    try:
        frontmatter = yaml.safe_load(parts[1])
    except yaml.YAMLError as e:
        logger.warning("Failed to parse YAML frontmatter: %s", e)
        return {}

    if not isinstance(frontmatter, dict):
        return {}

    return frontmatter


def extract_content(content: str) -> str:
    """Extract content after frontmatter.

    Args:
        content: Full note content including frontmatter

    Returns:
        Content without frontmatter
    """
    parts = _split(content)
    if parts is None:
        return content
    return parts[2]


def date_string(value: Any) -> Optional[str]:
    """Convert a frontmatter date value to a ``YYYY-MM-DD`` string.

    Strings are returned unchanged. Returns None for anything that is not a
    string, date or datetime.
    """
    if isinstance(value, str):
        return value

    # datetime is a subclass of date
    if isinstance(value, datetime.date):
        return value.strftime('%Y-%m-%d')

    return None


def load_context(note_path: Path, destination: Path) -> Context:
    """Read a note from disk and build its postprocessing context.

    Args:
        note_path: Path to the markdown note
        destination: Default output path the exporter computed for the note

    Returns:
        Context holding the note's decoded frontmatter
    """
    note_path = Path(note_path)
    content = note_path.read_text(encoding='utf-8')
    frontmatter = parse_frontmatter(content)
    return Context(current_file=note_path, destination=destination, frontmatter=frontmatter)
