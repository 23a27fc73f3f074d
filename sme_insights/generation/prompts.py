"""
Prompt templates for solution generation.

Plain string interpolation. Optional sections (challenge
patterns, historical examples) are omitted when empty so the
model never sees dangling headers.
"""

import json
from typing import List, Sequence

from sme_insights.schemas import ContextualData, FeedbackRecord, GenerationInput


PERSONA = (
    "You are an elite innovation strategist and disruptive business consultant "
    "specializing in transformational solutions for Small and Medium-sized "
    "Enterprises (SMEs). Your mission is to deliver breakthrough strategies that "
    "transcend conventional business wisdom and unlock growth opportunities."
)

INSTRUCTIONS = """### INSTRUCTIONS
1. **Contextual Analysis:** Use the market trends and economic outlook above.
2. **Synthesize & Strategize:** Integrate that context with the business description and challenges.
3. **Generate Solutions:** Generate 3-5 innovative, "out-of-the-box" solutions, highly tailored to the business and to the timing and external market factors.

### 1. Solutions (3-5 strategies)
For each solution provide:
- **heading**: A compelling, vision-driven title that challenges industry norms.
- **description**: 4-6 specific, actionable bullet points.
- **implementationCost**: One of "Low", "Medium", "High".
- **timeToValue**: One of "Immediate", "Short-term", "Medium-term", "Long-term".
- **requiredResources**: The people, tools or budget lines needed.

### 2. KPIs
List the key performance indicators that track the success of the solutions.
Write each KPI as "Name: what it measures", with a target percentage where it makes sense.

### 3. Impact Analysis & Data Storytelling
For each solution provide one impact analysis entry:
- **name**: Must exactly match the solution's heading.
- **projectedImpact**: Best estimate of the overall potential impact (0-100).
- **confidenceInterval**: [worstCase, bestCase], both 0-100, worstCase <= bestCase.
- **stakeholderValueDistribution**: Values (0-100) for "Customers", "Business", "Employees", "Community".

- **dataNarrative**: A short story (2-3 sentences) explaining the data for the **first** solution listed."""

FEEDBACK_DIRECTIVE = """**PREDICTIVE ANALYSIS FROM HISTORICAL FEEDBACK:**
Use the examples of past user feedback below to predict which solutions will be most effective.
Identify patterns correlating business problems to helpful and not helpful solutions, and
prioritize solutions with the highest probability of success."""

NOT_HELPFUL_REASONING = (
    "These were considered not helpful. Provide more specific, actionable, "
    "and creative advice. Avoid generic or obvious suggestions."
)


def _format_example(record: FeedbackRecord, reasoning: str | None = None) -> List[str]:
    lines = [
        f"- **Problem:** {record.input.custom_problem}",
        f"  - **Solution:** {json.dumps(record.output.to_wire(), ensure_ascii=False)}",
    ]
    if reasoning:
        lines.append(f"  - **Reasoning:** {reasoning}")
    return lines


def build_feedback_section(
    helpful: Sequence[FeedbackRecord],
    not_helpful: Sequence[FeedbackRecord],
) -> str:
    if not helpful and not not_helpful:
        return ""

    lines = ["---", FEEDBACK_DIRECTIVE]

    if helpful:
        lines += [
            "",
            "**Historical Data: HELPFUL solutions (High Success Probability - DO MORE OF THIS):**",
            "These are solutions that users found valuable for similar problems.",
        ]
        for rec in helpful:
            lines += _format_example(rec)

    if not_helpful:
        lines += [
            "",
            "**Historical Data: NOT HELPFUL solutions (Low Success Probability - AVOID THIS):**",
            "These are solutions that users rejected. Generate different, more innovative strategies.",
        ]
        for rec in not_helpful:
            lines += _format_example(rec, NOT_HELPFUL_REASONING)

    lines.append("---")
    return "\n".join(lines)


def build_solutions_prompt(
    generation_input: GenerationInput,
    helpful: Sequence[FeedbackRecord],
    not_helpful: Sequence[FeedbackRecord],
    context: ContextualData,
) -> str:
    sections = [
        PERSONA,
        "\n".join([
            "Business Context:",
            f"- Industry: {generation_input.industry}",
            f"- Business Description: {generation_input.business_context}",
        ]),
    ]

    if generation_input.common_problems:
        sections.append(
            "\n".join(
                ["Identified Challenge Patterns:"]
                + [f"- {p}" for p in generation_input.common_problems]
            )
        )

    sections.append(f"Core Business Challenge:\n{generation_input.custom_problem}")

    sections.append(
        "\n".join(
            ["Market Context:"]
            + [f"- Trend: {t}" for t in context.market_trends]
            + [
                f"- Economic outlook (current): {context.economic_outlook.current}",
                f"- Economic outlook (prediction): {context.economic_outlook.prediction}",
            ]
        )
    )

    sections.append(INSTRUCTIONS)

    feedback_section = build_feedback_section(helpful, not_helpful)
    if feedback_section:
        sections.append(feedback_section)

    return "\n\n".join(sections)
