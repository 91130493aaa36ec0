"""
Element name completion after ``<``.
"""

from __future__ import annotations

from svgsense.completion.generator import CompletionGenerator
from svgsense.completion.resolver import DEFAULT_CHECK_INTERVAL, find_parent_element, find_preceding_tag
from svgsense.completion.strategy import CompletionRequest, CompletionStrategy
from svgsense.completion.types import CompletionCandidate, Context
from svgsense.logger import get_logger

logger = get_logger("completion.tag")


class TagCompletionStrategy(CompletionStrategy):
    """Suggests elements allowed at the cursor, or the root for an empty document."""

    def __init__(self, generator: CompletionGenerator, check_interval: int = DEFAULT_CHECK_INTERVAL) -> None:
        self._generator = generator
        self._check_interval = check_interval

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.context is Context.TAG_OPEN

    def get_candidates(self, request: CompletionRequest) -> list[CompletionCandidate]:
        if find_preceding_tag(request.buffer, request.position) is None:
            logger.debug("Empty document, offering root skeleton")
            return self._generator.generate_tag_completions(None, True, request.position)

        ancestor = find_parent_element(
            request.buffer,
            request.position,
            request.token,
            self._check_interval,
        )
        logger.debug("Tag completion inside <{}>", ancestor.tag_name if ancestor else "document root")
        return self._generator.generate_tag_completions(ancestor, False, request.position)
