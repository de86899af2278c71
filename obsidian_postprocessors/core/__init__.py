"""Core components for Obsidian postprocessors."""

from obsidian_postprocessors.core.models import (
    AssetWriteError,
    Code,
    Context,
    End,
    Event,
    HardBreak,
    Html,
    Image,
    Link,
    MarkdownEvents,
    NoteError,
    PostprocessorResult,
    Rule,
    SoftBreak,
    Start,
    Text,
)
from obsidian_postprocessors.core.chain import Postprocessor, PostprocessorChain
from obsidian_postprocessors.core.frontmatter import extract_content, load_context, parse_frontmatter

__all__ = [
    "AssetWriteError",
    "Code",
    "Context",
    "End",
    "Event",
    "HardBreak",
    "Html",
    "Image",
    "Link",
    "MarkdownEvents",
    "NoteError",
    "PostprocessorResult",
    "Rule",
    "SoftBreak",
    "Start",
    "Text",
    "Postprocessor",
    "PostprocessorChain",
    "extract_content",
    "load_context",
    "parse_frontmatter",
]
