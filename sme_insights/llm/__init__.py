from .client import (
    LLMClient,
    LLMDisabledError,
    LLMConfigurationError,
    LLMRuntimeError,
)

__all__ = [
    "LLMClient",
    "LLMDisabledError",
    "LLMConfigurationError",
    "LLMRuntimeError",
]
