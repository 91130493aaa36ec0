"""
Attribute name completion inside a start tag.
"""

from __future__ import annotations

from svgsense.completion.generator import CompletionGenerator
from svgsense.completion.resolver import find_enclosing_start_tag
from svgsense.completion.strategy import CompletionRequest, CompletionStrategy
from svgsense.completion.types import CompletionCandidate, Context
from svgsense.logger import get_logger

logger = get_logger("completion.attribute")


class AttributeCompletionStrategy(CompletionStrategy):
    """Suggests the attributes of the enclosing element not typed yet."""

    def __init__(self, generator: CompletionGenerator) -> None:
        self._generator = generator

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.context is Context.ATTRIBUTE_NAME

    def get_candidates(self, request: CompletionRequest) -> list[CompletionCandidate]:
        tag = find_enclosing_start_tag(request.buffer, request.position)
        if tag is None:
            logger.debug("Cursor is not inside a start tag")
            return []
        return self._generator.generate_attribute_completions(tag.tag_name, tag.attributes_text)
