import json
import os
from typing import Any, Dict, Optional


class LLMDisabledError(RuntimeError):
    pass


class LLMConfigurationError(RuntimeError):
    pass


class LLMRuntimeError(RuntimeError):
    pass


DEFAULT_MODELS = {
    "gemini": "gemini-1.5-flash-latest",
    "openai": "gpt-4o-mini",
}

API_KEY_ENV = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert business consultant for small and "
    "medium-sized enterprises."
)


class LLMClient:
    """
    Provider-agnostic LLM client

    Supported providers:
    - openai
    - gemini

    Two call shapes:
    - generate(): free text (chat, analysis)
    - generate_json(): JSON constrained by an output schema
    """

    def __init__(self, config: dict):
        self.enabled = bool(config.get("enabled", False))
        self.provider = config.get("provider", "gemini")
        self.model = config.get("model") or DEFAULT_MODELS.get(self.provider)

        self.temperature = float(config.get("temperature", 0.7))
        self.max_tokens = int(config.get("max_tokens", 4096))

        if self.enabled:
            self._validate_config()

    # -------------------------------------------------
    # PUBLIC
    # -------------------------------------------------

    def generate(self, prompt: str, system: Optional[str] = None) -> str:
        return self._dispatch(prompt, system=system, schema=None)

    def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        system: Optional[str] = None,
    ) -> str:
        """
        Returns the raw JSON text. Parsing and validation
        belong to the caller.
        """
        if not isinstance(schema, dict):
            raise ValueError("Output schema must be a JSON schema dict")

        return self._dispatch(prompt, system=system, schema=schema)

    # -------------------------------------------------
    # DISPATCH
    # -------------------------------------------------

    def _dispatch(self, prompt, system, schema) -> str:
        if not self.enabled:
            raise LLMDisabledError("AI backend is disabled")

        if not prompt or not isinstance(prompt, str):
            raise ValueError("Prompt must be a non-empty string")

        if self.provider not in DEFAULT_MODELS:
            raise LLMConfigurationError(
                f"Unsupported LLM provider: {self.provider}"
            )

        if schema is not None:
            prompt = (
                f"{prompt}\n\n"
                "Respond with a single JSON object that validates against this JSON schema:\n"
                f"{json.dumps(schema)}"
            )

        try:
            if self.provider == "openai":
                return self._call_openai(prompt, system, json_mode=schema is not None)

            return self._call_gemini(prompt, system, json_mode=schema is not None)

        except (LLMConfigurationError, LLMRuntimeError):
            raise

        except Exception as e:
            raise LLMRuntimeError(
                f"{self.provider.upper()} LLM failed: {str(e)}"
            ) from e

    # -------------------------------------------------
    # VALIDATION
    # -------------------------------------------------

    def _validate_config(self):
        if self.provider not in DEFAULT_MODELS:
            raise LLMConfigurationError(
                f"Unsupported LLM provider: {self.provider}"
            )

        if not self.model:
            raise LLMConfigurationError("LLM model must be specified")

        env_name = API_KEY_ENV[self.provider]
        if not os.getenv(env_name):
            raise LLMConfigurationError(f"{env_name} is missing")

    # -------------------------------------------------
    # PROVIDERS
    # -------------------------------------------------

    def _call_openai(self, prompt: str, system: Optional[str], json_mode: bool) -> str:
        try:
            from openai import OpenAI
        except ImportError as e:
            raise LLMConfigurationError(
                "openai package not installed"
            ) from e

        client = OpenAI()

        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system or DEFAULT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            **kwargs,
        )

        content: Optional[str] = response.choices[0].message.content
        if not content:
            raise LLMRuntimeError("Empty response from OpenAI")

        return content.strip()

    def _call_gemini(self, prompt: str, system: Optional[str], json_mode: bool) -> str:
        try:
            import google.generativeai as genai
        except ImportError as e:
            raise LLMConfigurationError(
                "google-generativeai package not installed"
            ) from e

        genai.configure(api_key=os.getenv("GEMINI_API_KEY"))

        generation_config = {
            "temperature": self.temperature,
            "max_output_tokens": self.max_tokens,
        }
        if json_mode:
            generation_config["response_mime_type"] = "application/json"

        try:
            model = genai.GenerativeModel(
                self.model,
                system_instruction=system or DEFAULT_SYSTEM_PROMPT,
            )

            response = model.generate_content(
                prompt,
                generation_config=generation_config,
            )

        except Exception as e:
            raise LLMRuntimeError(
                "Gemini API error. "
                "Check model name, API key, and access permissions."
            ) from e

        if not response or not getattr(response, "text", None):
            raise LLMRuntimeError("Empty response from Gemini")

        return response.text.strip()
