from dataclasses import dataclass
from enum import Enum


class AnalysisType(str, Enum):
    SWOT = "SWOT"
    PESTLE = "PESTLE"
    PORTERS_FIVE_FORCES = "Porter's Five Forces"


@dataclass
class AnalysisResult:
    analysis_type: AnalysisType
    analysis_result: str


def build_analysis_prompt(business_data: str, analysis_type: AnalysisType) -> str:
    return (
        "You are an expert business analyst. You will analyze the provided "
        "business data using the specified framework.\n\n"
        f"Framework: {analysis_type.value}\n\n"
        f"Business Data: {business_data}\n\n"
        f"Analyze the business data using the {analysis_type.value} framework "
        "and provide a detailed analysis."
    )


def analyze_business_data(client, business_data: str, analysis_type) -> AnalysisResult:
    """
    Framework analysis (SWOT / PESTLE / Porter's Five Forces)
    of free-text business data. Backend errors propagate.
    """
    analysis_type = AnalysisType(analysis_type)

    if not business_data or not business_data.strip():
        raise ValueError("Business data must be a non-empty string")

    text = client.generate(build_analysis_prompt(business_data.strip(), analysis_type))

    return AnalysisResult(
        analysis_type=analysis_type,
        analysis_result=text.strip(),
    )
