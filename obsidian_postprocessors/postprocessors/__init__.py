"""Built-in postprocessors."""

from obsidian_postprocessors.postprocessors.destination import (
    DestinationFromFrontmatter,
    UrlKind,
    classify_url,
    copy_asset,
    shared_root,
)
from obsidian_postprocessors.postprocessors.linebreaks import SoftbreaksToHardbreaks
from obsidian_postprocessors.postprocessors.tags import FilterByTags, RemoveSpecifiedTags, filter_tags

__all__ = [
    "DestinationFromFrontmatter",
    "UrlKind",
    "classify_url",
    "copy_asset",
    "shared_root",
    "SoftbreaksToHardbreaks",
    "FilterByTags",
    "RemoveSpecifiedTags",
    "filter_tags",
]
