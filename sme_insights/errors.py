from typing import List, Optional


class GenerationError(RuntimeError):
    """
    Raised when solution generation cannot produce a valid plan.

    The UI never distinguishes the subclasses for the user;
    they exist for logging and tests.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class BackendUnavailableError(GenerationError):
    """AI backend unreachable, misconfigured or returned nothing."""


class SchemaValidationError(GenerationError):
    """AI output is not valid JSON or does not match the output schema."""


class CrossReferenceError(GenerationError):
    """An impact analysis entry names no generated solution."""


class ChatError(RuntimeError):
    pass


class FeedbackError(ValueError):
    pass
