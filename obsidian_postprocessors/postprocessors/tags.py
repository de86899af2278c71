"""Tag-based postprocessors."""

from dataclasses import dataclass, field
from typing import List, Sequence

from obsidian_postprocessors.core.models import Context, MarkdownEvents, PostprocessorResult


def filter_tags(
    tags: Sequence[str],
    skip_tags: Sequence[str],
    only_tags: Sequence[str],
) -> PostprocessorResult:
    """Decide whether a note with the given tags is exported.

    A note carrying any of skip_tags is skipped, even if it also carries one
    of only_tags. If only_tags is non-empty the note must carry at least one
    of them.

    Args:
        tags: The note's tags
        skip_tags: Tags that exclude a note
        only_tags: Tags of which a note must have at least one (if any are given)

    Returns:
        CONTINUE to keep the note, STOP_AND_SKIP_NOTE to drop it
    """
    note_tags = set(tags)
    skip = any(tag in note_tags for tag in skip_tags)
    include = not only_tags or any(tag in note_tags for tag in only_tags)

    if skip or not include:
        return PostprocessorResult.STOP_AND_SKIP_NOTE
    return PostprocessorResult.CONTINUE


@dataclass
class FilterByTags:
    """Skip notes based on their frontmatter tags."""

    skip_tags: List[str] = field(default_factory=list)
    only_tags: List[str] = field(default_factory=list)

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Check the note's tags against the configured lists.

        Returns:
            CONTINUE to keep the note, STOP_AND_SKIP_NOTE to drop it
        """
        return filter_tags(context.tags(), self.skip_tags, self.only_tags)


@dataclass
class RemoveSpecifiedTags:
    """Strip the configured tags from the frontmatter tag list.

    The remaining tags keep their order. With create_missing set, a note
    without a usable tag list gets an empty ``tags`` field; otherwise notes
    that have no ``tags`` key are left alone.
    """

    remove: List[str] = field(default_factory=list)
    create_missing: bool = True

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Rewrite the note's ``tags`` field without the removed tags."""
        if not self.create_missing and 'tags' not in context.frontmatter:
            return PostprocessorResult.CONTINUE

        to_remove = set(self.remove)
        context.frontmatter['tags'] = [tag for tag in context.tags() if tag not in to_remove]
        return PostprocessorResult.CONTINUE
