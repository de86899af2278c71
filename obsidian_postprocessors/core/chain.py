"""Postprocessor chain for running stages over a single note."""

import logging
from typing import Callable, List, Optional

from obsidian_postprocessors.core.models import Context, MarkdownEvents, PostprocessorResult

logger = logging.getLogger(__name__)

Postprocessor = Callable[[Context, MarkdownEvents], PostprocessorResult]


class PostprocessorChain:
    """Runs an ordered list of postprocessors over one note.

    Each postprocessor may mutate the context and the events. The first one
    to return STOP_AND_SKIP_NOTE ends the run and the note must not be
    exported.
    """

    def __init__(self, postprocessors: Optional[List[Postprocessor]] = None):
        """Initialize PostprocessorChain.

        Args:
            postprocessors: Stages to run, in order
        """
        self.postprocessors: List[Postprocessor] = list(postprocessors or [])

    def append(self, postprocessor: Postprocessor) -> None:
        """Add a stage to the end of the chain."""
        self.postprocessors.append(postprocessor)

    def __len__(self) -> int:
        return len(self.postprocessors)

    def run(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        """Run every stage over the note.

        Args:
            context: Per-note context, mutated in place
            events: Markdown events, mutated in place

        Returns:
            CONTINUE if the note should be exported, STOP_AND_SKIP_NOTE otherwise
        """
        for postprocessor in self.postprocessors:
            result = postprocessor(context, events)
            if result is PostprocessorResult.STOP_AND_SKIP_NOTE:
                logger.debug("Skipping %s: vetoed by %r", context.current_file, postprocessor)
                return result

        for error in context.errors:
            logger.warning("%s: %s", context.current_file, error.error)

        return PostprocessorResult.CONTINUE
