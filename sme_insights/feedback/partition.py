from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from sme_insights.schemas import FeedbackRating, FeedbackRecord


@dataclass
class FeedbackPartition:
    helpful: List[FeedbackRecord] = field(default_factory=list)
    not_helpful: List[FeedbackRecord] = field(default_factory=list)
    other: List[FeedbackRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.helpful) + len(self.not_helpful) + len(self.other)


def partition_feedback(records: Iterable[FeedbackRecord]) -> FeedbackPartition:
    """
    Split records by rating. Insertion order is kept inside
    each partition; every record lands in exactly one.
    """
    partition = FeedbackPartition()

    for rec in records:
        if rec.feedback == FeedbackRating.HELPFUL:
            partition.helpful.append(rec)
        elif rec.feedback == FeedbackRating.NOT_HELPFUL:
            partition.not_helpful.append(rec)
        else:
            partition.other.append(rec)

    return partition


def retrieve_feedback_for_analysis(store) -> FeedbackPartition:
    return partition_feedback(store.retrieve_all())


def feedback_summary(records: Iterable[FeedbackRecord]) -> Dict[str, Any]:
    partition = partition_feedback(records)
    total = len(partition)

    return {
        "total": total,
        "helpful": len(partition.helpful),
        "not_helpful": len(partition.not_helpful),
        "helpful_ratio": round(len(partition.helpful) / total, 2) if total else None,
    }
