from .store import (
    FeedbackStore,
    InMemoryFeedbackStore,
    SQLiteFeedbackStore,
    build_feedback_store,
    submit_feedback,
)
from .partition import (
    FeedbackPartition,
    partition_feedback,
    retrieve_feedback_for_analysis,
    feedback_summary,
)

__all__ = [
    "FeedbackStore",
    "InMemoryFeedbackStore",
    "SQLiteFeedbackStore",
    "build_feedback_store",
    "submit_feedback",
    "FeedbackPartition",
    "partition_feedback",
    "retrieve_feedback_for_analysis",
    "feedback_summary",
]
