"""
Form catalogs and validation.

Form data is a plain dict as collected by the UI:
    industry, businessContext, commonProblems (ids), customProblem
"""

from typing import Any, Dict, List

from sme_insights.schemas import GenerationInput

MIN_PROBLEM_LENGTH = 10

COMMON_PROBLEMS: Dict[str, str] = {
    "low_sales": "Low Sales / Revenue",
    "marketing_ineffective": "Ineffective Marketing",
    "high_costs": "High Operational Costs",
    "customer_retention": "Poor Customer Retention",
    "employee_turnover": "High Employee Turnover",
    "supply_chain": "Supply Chain Issues",
}

INDUSTRIES: Dict[str, str] = {
    "tech": "Technology",
    "retail": "Retail & E-commerce",
    "health": "Healthcare",
    "manufacturing": "Manufacturing",
    "hospitality": "Hospitality",
    "finance": "Financial Services",
    "other": "Other",
}

MESSAGES = {
    "industry": "Please select your industry.",
    "customProblem": "Please describe your problem in more detail.",
}


def validate_form(data: Dict[str, Any], min_problem_length: int = MIN_PROBLEM_LENGTH) -> Dict[str, str]:
    """
    Returns {field: message}; empty dict means the form is valid.
    """
    errors: Dict[str, str] = {}

    industry = (data.get("industry") or "").strip()
    if not industry:
        errors["industry"] = MESSAGES["industry"]

    problem = (data.get("customProblem") or "").strip()
    if len(problem) < min_problem_length:
        errors["customProblem"] = MESSAGES["customProblem"]

    return errors


def selected_problem_labels(problem_ids: List[str]) -> List[str]:
    return [COMMON_PROBLEMS[p] for p in problem_ids or [] if p in COMMON_PROBLEMS]


def build_generation_input(data: Dict[str, Any]) -> GenerationInput:
    context = (data.get("businessContext") or "").strip()

    return GenerationInput(
        industry=data["industry"].strip(),
        business_context=context or "Not provided",
        common_problems=tuple(selected_problem_labels(data.get("commonProblems"))),
        custom_problem=data["customProblem"].strip(),
    )
