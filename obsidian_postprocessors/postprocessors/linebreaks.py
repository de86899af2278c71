"""Line break postprocessor."""

from obsidian_postprocessors.core.models import (
    Context,
    HardBreak,
    MarkdownEvents,
    PostprocessorResult,
    SoftBreak,
)


class SoftbreaksToHardbreaks:
    """Convert all soft line breaks to hard line breaks.

    Mimics Obsidian's 'Strict line breaks' setting being turned off.
    """

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Replace soft breaks in place.

        Args:
            context: Per-note context (unused)
            events: Markdown events, mutated in place

        Returns:
            Always CONTINUE
        """
        for i, event in enumerate(events):
            if isinstance(event, SoftBreak):
                events[i] = HardBreak()
        return PostprocessorResult.CONTINUE

    def __repr__(self) -> str:
        return "SoftbreaksToHardbreaks()"
