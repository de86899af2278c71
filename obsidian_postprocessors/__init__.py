"""
Obsidian Postprocessors - Per-note postprocessing for Obsidian exports

A small pipeline of stages run over each exported note, with built-in
support for:
- Strict line breaks
- Redirecting output paths from frontmatter (with image relocation)
- Including or excluding notes by tag
- Removing tags from frontmatter
"""

from obsidian_postprocessors.core.models import AssetWriteError, Context, NoteError, PostprocessorResult
from obsidian_postprocessors.core.chain import PostprocessorChain
from obsidian_postprocessors.core.config import ConfigError, PostprocessorConfig, build_chain, load_config
from obsidian_postprocessors.postprocessors.destination import DestinationFromFrontmatter
from obsidian_postprocessors.postprocessors.linebreaks import SoftbreaksToHardbreaks
from obsidian_postprocessors.postprocessors.tags import FilterByTags, RemoveSpecifiedTags

__version__ = "0.1.0"

__all__ = [
    "AssetWriteError",
    "Context",
    "NoteError",
    "PostprocessorResult",
    "PostprocessorChain",
    "ConfigError",
    "PostprocessorConfig",
    "build_chain",
    "load_config",
    "DestinationFromFrontmatter",
    "SoftbreaksToHardbreaks",
    "FilterByTags",
    "RemoveSpecifiedTags",
]
