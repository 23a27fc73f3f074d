"""
Output Validation
-----------------
Turns raw backend text into a GenerationOutput.

Rules:
- Never raises; returns a tagged ParseResult
- Structural (schema) checks run before the
  heading <-> impact name cross-reference check
- A failed result never carries a partial output
"""

import json
import re
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import ValidationError

from sme_insights.schemas import GenerationOutput


INVALID_JSON = "invalid_json"
SCHEMA = "schema"
CROSS_REFERENCE = "cross_reference"

_FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


@dataclass
class ParseResult:
    ok: bool
    output: Optional[GenerationOutput] = None
    error_kind: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, output: GenerationOutput) -> "ParseResult":
        return cls(ok=True, output=output)

    @classmethod
    def failure(cls, kind: str, errors: List[str]) -> "ParseResult":
        return cls(ok=False, error_kind=kind, errors=list(errors))


def strip_code_fence(raw: str) -> str:
    match = _FENCE_RE.match(raw or "")
    return match.group(1) if match else (raw or "").strip()


def check_cross_references(output: GenerationOutput) -> List[str]:
    headings = set(output.headings)

    return [
        f"impactAnalysis[{i}].name {entry.name!r} matches no solution heading"
        for i, entry in enumerate(output.impact_analysis)
        if entry.name not in headings
    ]


def _format_validation_errors(exc: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def parse_generation_output(raw: str) -> ParseResult:
    text = strip_code_fence(raw)

    try:
        payload = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        return ParseResult.failure(INVALID_JSON, [f"Response is not valid JSON: {e}"])

    if not isinstance(payload, dict):
        return ParseResult.failure(
            SCHEMA, [f"Expected a JSON object, got {type(payload).__name__}"]
        )

    try:
        output = GenerationOutput.model_validate(payload)
    except ValidationError as e:
        return ParseResult.failure(SCHEMA, _format_validation_errors(e))

    mismatches = check_cross_references(output)
    if mismatches:
        return ParseResult.failure(CROSS_REFERENCE, mismatches)

    return ParseResult.success(output)


def output_json_schema() -> dict:
    """JSON schema sent with the generation request (camelCase keys)."""
    return GenerationOutput.model_json_schema(by_alias=True)
