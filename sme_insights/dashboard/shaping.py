"""
Derived dashboard state: form progress, KPI cards and
chart-ready frames built from a GenerationOutput.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from sme_insights.forms import MIN_PROBLEM_LENGTH
from sme_insights.schemas import GenerationOutput

logger = logging.getLogger(__name__)

STAKEHOLDERS = ["Customers", "Business", "Employees", "Community"]


# =====================================================
# FORM PROGRESS
# =====================================================

def form_progress(data: Dict[str, Any], min_problem_length: int = MIN_PROBLEM_LENGTH) -> int:
    """
    Percentage of the four form sections that are filled in.
    The problem description only counts once it is long enough
    to pass validation.
    """
    filled = [
        bool((data.get("industry") or "").strip()),
        bool((data.get("businessContext") or "").strip()),
        bool(data.get("commonProblems")),
        len((data.get("customProblem") or "").strip()) >= min_problem_length,
    ]
    return round(100 * sum(filled) / len(filled))


# =====================================================
# KPI PARSING
# =====================================================

# First match wins; order matters
KPI_CATEGORIES = [
    ("Sustainability", [r"sustainab", r"circular", r"waste", r"carbon", r"regenerat"]),
    ("Customer", [r"customer", r"client", r"retention", r"churn", r"satisfaction", r"\bnps\b", r"repeat"]),
    ("People", [r"employee", r"staff", r"turnover", r"engagement", r"talent", r"skill"]),
    ("Financial", [r"revenue", r"sales", r"profit", r"margin", r"\broi\b", r"cash", r"price"]),
    ("Operational", [r"cost", r"efficien", r"lead time", r"inventory", r"supply", r"throughput"]),
    ("Innovation", [r"innovation", r"partner", r"ecosystem", r"platform", r"velocity", r"experiment"]),
]

_TARGET_RE = re.compile(r"(\d+(?:\.\d+)?)\s*%")
_TARGET_HINT_RE = re.compile(r"\b(?:target|to)\b\D{0,20}?(\d+(?:\.\d+)?)\s*%", re.IGNORECASE)
# Split on a colon, or on a dash with whitespace both sides; hyphens inside the title stay
_TITLE_RE = re.compile(r"^\s*(.{2,80}?)\s*(?::|\s[-–])\s+(.+)$", re.DOTALL)


@dataclass
class KpiCard:
    title: str
    description: str
    category: str
    target: Optional[float] = None


def _classify(text: str) -> str:
    lowered = text.lower()
    for category, patterns in KPI_CATEGORIES:
        if any(re.search(p, lowered) for p in patterns):
            return category
    return "General"


def parse_kpi(text: str) -> KpiCard:
    text = (text or "").strip()

    match = _TITLE_RE.match(text)
    if match:
        title, description = match.group(1).strip(), match.group(2).strip()
    else:
        title, description = text, ""

    # "target 35%" / "to 10%" wins; otherwise the last percentage mentioned
    hinted = _TARGET_HINT_RE.search(text)
    percentages = _TARGET_RE.findall(text)
    if hinted:
        target = float(hinted.group(1))
    elif percentages:
        target = float(percentages[-1])
    else:
        target = None

    return KpiCard(
        title=title,
        description=description,
        category=_classify(text),
        target=target,
    )


def parse_kpis(kpis: List[str]) -> List[KpiCard]:
    return [parse_kpi(k) for k in kpis if k and k.strip()]


# =====================================================
# CHART FRAMES
# =====================================================

def _matched_impacts(output: GenerationOutput):
    by_name = {entry.name: entry for entry in output.impact_analysis}

    unmatched = set(by_name) - set(output.headings)
    if unmatched:
        logger.warning("Impact entries without a solution: %s", sorted(unmatched))

    return [
        (heading, by_name[heading])
        for heading in output.headings
        if heading in by_name
    ]


def impact_frame(output: GenerationOutput) -> pd.DataFrame:
    """
    One row per solution (in solution order) that has an
    impact analysis entry.
    """
    rows = [
        {
            "name": heading,
            "projected": entry.projected_impact,
            "worst": entry.worst_case,
            "best": entry.best_case,
        }
        for heading, entry in _matched_impacts(output)
    ]
    return pd.DataFrame(rows, columns=["name", "projected", "worst", "best"])


def stakeholder_frame(output: GenerationOutput) -> pd.DataFrame:
    rows = {
        heading: entry.stakeholder_value_distribution.as_dict()
        for heading, entry in _matched_impacts(output)
    }
    frame = pd.DataFrame.from_dict(rows, orient="index", columns=STAKEHOLDERS)
    frame.index.name = "name"
    return frame
