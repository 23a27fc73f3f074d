"""
Feedback Store
--------------
Append-only log of (input, output, rating) records.

Contract:
- record() never deduplicates and never drops
- retrieve_all() returns records in insertion order
- Records are never mutated or deleted
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Union

from pydantic import ValidationError

from sme_insights.errors import FeedbackError
from sme_insights.schemas import (
    FeedbackRating,
    FeedbackRecord,
    GenerationInput,
    GenerationOutput,
)

logger = logging.getLogger(__name__)


class FeedbackStore(ABC):
    @abstractmethod
    def record(self, record: FeedbackRecord) -> None:
        pass

    @abstractmethod
    def retrieve_all(self) -> List[FeedbackRecord]:
        pass

    def __len__(self) -> int:
        return len(self.retrieve_all())


class InMemoryFeedbackStore(FeedbackStore):
    """
    Process-local store. Contents are lost on restart.
    """

    def __init__(self):
        self._records: List[FeedbackRecord] = []

    def record(self, record: FeedbackRecord) -> None:
        self._records.append(record)
        logger.info(
            "Received feedback (%s) for problem: %s",
            record.feedback.value,
            record.input.custom_problem,
        )

    def retrieve_all(self) -> List[FeedbackRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


class SQLiteFeedbackStore(FeedbackStore):
    """
    Persistent store backed by a single SQLite table.
    Records are kept as JSON and read back in rowid order.
    """

    def __init__(self, db_path="data/feedback.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS feedback (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    recorded_at TEXT,
                    rating TEXT,
                    payload TEXT
                )
            """)

    def record(self, record: FeedbackRecord) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO feedback VALUES (NULL, ?, ?, ?)",
                (
                    record.recorded_at,
                    record.feedback.value,
                    json.dumps(record.model_dump(mode="json", by_alias=True)),
                )
            )
        logger.info(
            "Persisted feedback (%s) to %s",
            record.feedback.value,
            self.db_path,
        )

    def retrieve_all(self) -> List[FeedbackRecord]:
        with sqlite3.connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT payload FROM feedback ORDER BY id"
            ).fetchall()

        return [FeedbackRecord.model_validate(json.loads(row[0])) for row in rows]

    def __len__(self) -> int:
        with sqlite3.connect(self.db_path) as conn:
            (count,) = conn.execute("SELECT COUNT(*) FROM feedback").fetchone()
        return count


def build_feedback_store(config: Dict) -> FeedbackStore:
    feedback_cfg = config.get("feedback", {})
    backend = feedback_cfg.get("backend", "memory")

    if backend == "memory":
        return InMemoryFeedbackStore()

    if backend == "sqlite":
        return SQLiteFeedbackStore(feedback_cfg.get("db_path", "data/feedback.db"))

    raise ValueError(f"Unsupported feedback backend: {backend}")


def submit_feedback(
    store: FeedbackStore,
    generation_input: GenerationInput,
    generation_output: GenerationOutput,
    rating: Union[str, FeedbackRating],
) -> FeedbackRecord:
    """
    Validate a user rating and append it to the store.
    """
    try:
        record = FeedbackRecord(
            input=generation_input,
            output=generation_output,
            feedback=rating,
        )
    except ValidationError as e:
        raise FeedbackError(f"Invalid feedback rating: {rating!r}") from e

    store.record(record)
    return record
