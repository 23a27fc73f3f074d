"""
Follow-up questions about a generated action plan.
Answers are grounded only in the plan itself.
"""

import json
import logging
from typing import Sequence

from sme_insights.errors import ChatError
from sme_insights.llm import LLMConfigurationError, LLMDisabledError, LLMRuntimeError
from sme_insights.schemas import ChatMessage, GenerationOutput

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = (
    "I'm sorry, I couldn't generate a response. "
    "Please try asking in a different way."
)

CHAT_SYSTEM_PROMPT = (
    "You are an expert business consultant AI. You answer follow-up questions "
    "about business solutions you have already provided."
)


def build_chat_prompt(
    solution_context: GenerationOutput,
    history: Sequence[ChatMessage],
    query: str,
) -> str:
    lines = [
        "You MUST NOT invent new solutions or provide information outside of the provided context.",
        "Your answers should be concise, helpful, and directly related to the user's query.",
        "",
        "## Provided Solution Context ##",
        "This is the action plan you have already generated. Base your answers ONLY on this information.",
        "```json",
        json.dumps(solution_context.to_wire(), indent=2, ensure_ascii=False),
        "```",
        "",
        "## Conversation History ##",
    ]
    lines += [f"- {m.role}: {m.content}" for m in history]
    lines += [
        "",
        "## User's New Question ##",
        f"- user: {query}",
        "",
        "## Output Format ##",
        "Answer with plain text only. No JSON, no markdown.",
    ]
    return "\n".join(lines)


def chat_with_solution(
    client,
    solution_context: GenerationOutput,
    history: Sequence[ChatMessage],
    query: str,
) -> str:
    if not query or not query.strip():
        raise ValueError("Query must be a non-empty string")

    prompt = build_chat_prompt(solution_context, history, query.strip())

    try:
        answer = client.generate(prompt, system=CHAT_SYSTEM_PROMPT)
    except (LLMDisabledError, LLMConfigurationError, LLMRuntimeError) as e:
        raise ChatError("Chat backend is unavailable") from e

    if not answer or not answer.strip():
        logger.warning("Empty chat answer for query: %s", query)
        return FALLBACK_ANSWER

    return answer.strip()
