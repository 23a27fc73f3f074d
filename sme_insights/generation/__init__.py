from .engine import SolutionGenerator
from .parser import (
    ParseResult,
    parse_generation_output,
    check_cross_references,
    output_json_schema,
)
from .prompts import build_solutions_prompt

__all__ = [
    "SolutionGenerator",
    "ParseResult",
    "parse_generation_output",
    "check_cross_references",
    "output_json_schema",
    "build_solutions_prompt",
]
