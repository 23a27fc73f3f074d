"""
Solution Generation
-------------------
One request = one feedback retrieval + one contextual data fetch
+ one backend call. No caching, no retries.
"""

import functools
import logging
from typing import Callable, Optional

from sme_insights.errors import (
    BackendUnavailableError,
    CrossReferenceError,
    SchemaValidationError,
)
from sme_insights.feedback import FeedbackStore, retrieve_feedback_for_analysis
from sme_insights.generation.parser import (
    CROSS_REFERENCE,
    output_json_schema,
    parse_generation_output,
)
from sme_insights.generation.prompts import build_solutions_prompt
from sme_insights.llm import LLMClient, LLMConfigurationError, LLMDisabledError, LLMRuntimeError
from sme_insights.monitoring import MetricsCollector
from sme_insights.schemas import ContextualData, GenerationInput, GenerationOutput
from sme_insights.tools import fetch_contextual_data

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a business strategy engine. You answer only with JSON "
    "that matches the requested schema."
)


class SolutionGenerator:
    def __init__(
        self,
        client,
        store: FeedbackStore,
        context_fetcher: Optional[Callable[[str], ContextualData]] = None,
    ):
        self.client = client
        self.store = store
        self.context_fetcher = context_fetcher or fetch_contextual_data

    @classmethod
    def from_config(cls, config: dict, store: FeedbackStore) -> "SolutionGenerator":
        delay = float(config.get("context", {}).get("delay_seconds", 0.5))

        return cls(
            client=LLMClient(config.get("llm", {})),
            store=store,
            context_fetcher=functools.partial(fetch_contextual_data, delay=delay),
        )

    def build_prompt(self, generation_input: GenerationInput) -> str:
        partition = retrieve_feedback_for_analysis(self.store)
        context = self.context_fetcher(generation_input.industry)

        logger.debug(
            "Prompt uses %d helpful / %d not helpful examples",
            len(partition.helpful),
            len(partition.not_helpful),
        )

        return build_solutions_prompt(
            generation_input,
            helpful=partition.helpful,
            not_helpful=partition.not_helpful,
            context=context,
        )

    def generate(self, generation_input: GenerationInput) -> GenerationOutput:
        """
        Returns a fully validated GenerationOutput or raises a
        GenerationError subclass.
        """
        metrics = MetricsCollector("generate_solutions")
        prompt = self.build_prompt(generation_input)

        try:
            raw = self.client.generate_json(
                prompt,
                schema=output_json_schema(),
                system=SYSTEM_PROMPT,
            )
        except (LLMDisabledError, LLMConfigurationError, LLMRuntimeError) as e:
            metrics.log(logger, "backend_error")
            raise BackendUnavailableError(
                "AI backend is unavailable", [str(e)]
            ) from e

        if not raw:
            metrics.log(logger, "empty_response")
            raise BackendUnavailableError("AI backend returned an empty response")

        result = parse_generation_output(raw)

        if not result.ok:
            metrics.log(logger, result.error_kind)
            logger.warning(
                "Discarding AI output (%s): %s",
                result.error_kind,
                "; ".join(result.errors),
            )
            if result.error_kind == CROSS_REFERENCE:
                raise CrossReferenceError(
                    "Impact analysis does not match generated solutions",
                    result.errors,
                )
            raise SchemaValidationError(
                "AI output failed schema validation",
                result.errors,
            )

        metrics.log(logger, "ok")
        return result.output
