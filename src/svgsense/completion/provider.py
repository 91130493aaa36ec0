"""
Completion entry point coordinating the context strategies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from svgsense.buffer import CancellationToken, Position, TextBuffer
from svgsense.completion.attribute_completion import AttributeCompletionStrategy
from svgsense.completion.generator import CompletionGenerator
from svgsense.completion.strategy import CompletionRequest, CompletionStrategy
from svgsense.completion.tag_completion import TagCompletionStrategy
from svgsense.completion.types import CompletionCandidate, Context
from svgsense.completion.value_completion import AttributeValueCompletionStrategy
from svgsense.config import CompletionSettings
from svgsense.exceptions import CompletionCancelled
from svgsense.logger import get_logger
from svgsense.schema import SchemaCatalog, catalog_for

logger = get_logger("completion.provider")


class SvgCompletionProvider:
    """Classifies the cursor context and selects the strategy that serves it.

    The provider holds only the immutable catalog and its settings; every
    call re-derives its context from the live buffer. Failures of any kind
    are logged and produce no candidates.
    """

    def __init__(
        self,
        catalog: Optional[SchemaCatalog] = None,
        settings: Optional[CompletionSettings] = None,
        strategies: Optional[Sequence[CompletionStrategy]] = None,
    ) -> None:
        self._settings = settings or CompletionSettings()
        self._catalog = catalog if catalog is not None else catalog_for(self._settings.schema_path)
        self._generator = CompletionGenerator(self._catalog, show_deprecated=self._settings.show_deprecated)
        if strategies is None:
            strategies = (
                TagCompletionStrategy(self._generator, self._settings.scan_check_interval),
                AttributeCompletionStrategy(self._generator),
                AttributeValueCompletionStrategy(self._generator),
            )
        self._strategies = list(strategies)

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    @property
    def generator(self) -> CompletionGenerator:
        return self._generator

    def provide_completions(
        self,
        buffer: TextBuffer,
        position: Position,
        token: Optional[CancellationToken] = None,
    ) -> list[CompletionCandidate]:
        return self.complete(CompletionRequest(buffer, position, token))

    def complete(self, request: CompletionRequest) -> list[CompletionCandidate]:
        if request.context is Context.NONE:
            return []

        for strategy in self._strategies:
            try:
                if not strategy.can_handle(request):
                    continue
                logger.debug("Strategy {} selected for {}", strategy.__class__.__name__, request.context.value)
                candidates = strategy.get_candidates(request)
            except CompletionCancelled:
                logger.debug("Completion cancelled at {}", request.position)
                return []
            except Exception:
                logger.exception(f"Completion strategy {strategy.__class__.__name__} failed")
                return []

            if request.cancelled:
                return []
            return candidates

        logger.debug("No completion strategy matched context {}", request.context.value)
        return []
