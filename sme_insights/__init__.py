"""
SME Insights Navigator

AI-assisted business advisory: problem intake, solution
generation, impact dashboards and feedback-guided prompting.
"""

from .__version__ import __version__

# Keep package init lightweight and safe
# LLM providers and UI dependencies are imported lazily by their modules

from .schemas import (
    GenerationInput,
    GenerationOutput,
    Solution,
    ImpactAnalysis,
    FeedbackRecord,
)
from .errors import (
    GenerationError,
    BackendUnavailableError,
    SchemaValidationError,
    CrossReferenceError,
)
from .feedback import InMemoryFeedbackStore, SQLiteFeedbackStore, submit_feedback
from .generation import SolutionGenerator

__all__ = [
    "__version__",
    "GenerationInput",
    "GenerationOutput",
    "Solution",
    "ImpactAnalysis",
    "FeedbackRecord",
    "GenerationError",
    "BackendUnavailableError",
    "SchemaValidationError",
    "CrossReferenceError",
    "InMemoryFeedbackStore",
    "SQLiteFeedbackStore",
    "submit_feedback",
    "SolutionGenerator",
]
