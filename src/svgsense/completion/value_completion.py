"""
Attribute value completion after ``=`` or an opening quote.
"""

from __future__ import annotations

from svgsense.completion.generator import CompletionGenerator
from svgsense.completion.resolver import find_enclosing_attribute
from svgsense.completion.strategy import CompletionRequest, CompletionStrategy
from svgsense.completion.types import CompletionCandidate, Context
from svgsense.logger import get_logger

logger = get_logger("completion.value")


class AttributeValueCompletionStrategy(CompletionStrategy):
    """Suggests the enumerated values of the attribute being assigned."""

    def __init__(self, generator: CompletionGenerator) -> None:
        self._generator = generator

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.context is Context.ATTRIBUTE_VALUE

    def get_candidates(self, request: CompletionRequest) -> list[CompletionCandidate]:
        match = find_enclosing_attribute(request.buffer, request.position)
        if match is None:
            logger.debug("No attribute assignment at cursor")
            return []

        attribute = self._generator.catalog.resolve_element_attribute(match.tag_name, match.attribute_name)
        logger.debug(
            "Value completion for <{} {}> (known={})",
            match.tag_name,
            match.attribute_name,
            attribute is not None,
        )
        return self._generator.generate_enum_completions(attribute)
