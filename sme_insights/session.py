"""
Advisor Session
---------------
Form / Dashboard state machine behind the UI.

    FORM --submit (generation ok)--> DASHBOARD
    DASHBOARD --reset--> FORM

While a request is in flight further submissions are inert.
The UI submits in two steps: request_submit() from the button
callback locks the controls, run_requested_submit() performs the
request on the following script run.
Generation failures keep the session on FORM and surface one
generic notification.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from sme_insights.chat import chat_with_solution
from sme_insights.errors import ChatError, GenerationError
from sme_insights.feedback import FeedbackStore, submit_feedback
from sme_insights.forms import MIN_PROBLEM_LENGTH, build_generation_input, validate_form
from sme_insights.schemas import (
    ChatMessage,
    FeedbackRecord,
    GenerationInput,
    GenerationOutput,
)

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate solutions. Please try again."
CHAT_FAILED_MESSAGE = "The assistant is unavailable right now. Please try again."


class ViewState(str, Enum):
    FORM = "form"
    DASHBOARD = "dashboard"


@dataclass
class SubmitOutcome:
    accepted: bool
    field_errors: Dict[str, str] = field(default_factory=dict)
    notification: Optional[str] = None


class AdvisorSession:
    def __init__(self, generator, store: FeedbackStore, min_problem_length: int = MIN_PROBLEM_LENGTH):
        self.generator = generator
        self.store = store
        self.min_problem_length = min_problem_length

        self.state = ViewState.FORM
        self.is_loading = False
        self.submit_requested = False
        self.last_input: Optional[GenerationInput] = None
        self.result: Optional[GenerationOutput] = None
        self.feedback_given: Optional[FeedbackRecord] = None
        self.chat_history: List[ChatMessage] = []

    # -------------------------------------------------
    # FORM -> DASHBOARD
    # -------------------------------------------------

    @property
    def controls_locked(self) -> bool:
        return self.is_loading or self.submit_requested

    def request_submit(self) -> bool:
        """
        Marks a submission as pending. Returns False (and changes
        nothing) when one is already pending or in flight.
        """
        if self.controls_locked:
            logger.debug("Submit request ignored: controls locked")
            return False

        self.submit_requested = True
        return True

    def run_requested_submit(self, data: Dict[str, Any]) -> Optional[SubmitOutcome]:
        if not self.submit_requested:
            return None

        try:
            return self.submit(data)
        finally:
            self.submit_requested = False

    def submit(self, data: Dict[str, Any]) -> SubmitOutcome:
        if self.is_loading:
            logger.debug("Submit ignored: generation already in progress")
            return SubmitOutcome(accepted=False)

        errors = validate_form(data, self.min_problem_length)
        if errors:
            return SubmitOutcome(accepted=False, field_errors=errors)

        generation_input = build_generation_input(data)

        self.is_loading = True
        try:
            output = self.generator.generate(generation_input)
        except GenerationError:
            logger.exception("Solution generation failed")
            return SubmitOutcome(accepted=False, notification=GENERATION_FAILED_MESSAGE)
        finally:
            self.is_loading = False

        self.last_input = generation_input
        self.result = output
        self.feedback_given = None
        self.chat_history = []
        self.state = ViewState.DASHBOARD

        return SubmitOutcome(accepted=True)

    # -------------------------------------------------
    # DASHBOARD -> FORM
    # -------------------------------------------------

    def reset(self) -> None:
        self.state = ViewState.FORM
        self.last_input = None
        self.result = None
        self.feedback_given = None
        self.chat_history = []

    # -------------------------------------------------
    # DASHBOARD ACTIONS
    # -------------------------------------------------

    def give_feedback(self, rating: str) -> Optional[FeedbackRecord]:
        """
        Records the rating for the current plan. Only the first
        rating per plan is stored.
        """
        if self.state != ViewState.DASHBOARD or self.result is None:
            raise RuntimeError("Feedback requires a generated plan")

        if self.feedback_given is not None:
            return None

        self.feedback_given = submit_feedback(
            self.store, self.last_input, self.result, rating
        )
        return self.feedback_given

    def ask(self, query: str) -> str:
        if self.state != ViewState.DASHBOARD or self.result is None:
            raise RuntimeError("Chat requires a generated plan")

        if not query or not query.strip():
            return ""

        try:
            answer = chat_with_solution(
                self.generator.client, self.result, self.chat_history, query
            )
        except ChatError:
            logger.exception("Chat request failed")
            return CHAT_FAILED_MESSAGE

        self.chat_history.append(ChatMessage(role="user", content=query.strip()))
        self.chat_history.append(ChatMessage(role="model", content=answer))
        return answer
