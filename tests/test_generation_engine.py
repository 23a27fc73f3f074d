import json

import pytest

from sme_insights.errors import (
    BackendUnavailableError,
    CrossReferenceError,
    GenerationError,
    SchemaValidationError,
)
from sme_insights.feedback import submit_feedback
from sme_insights.generation import SolutionGenerator
from sme_insights.llm import LLMConfigurationError, LLMRuntimeError
from sme_insights.schemas import GenerationOutput


def test_scenario_repeat_purchase_rate(make_generator, sample_input, valid_raw):
    generator = make_generator([valid_raw])

    output = generator.generate(sample_input)

    assert isinstance(output, GenerationOutput)
    assert 3 <= len(output.solutions) <= 5
    headings = {s.heading for s in output.solutions}
    assert all(entry.name in headings for entry in output.impact_analysis)


def test_generate_fetches_context_once(make_generator, sample_input, valid_raw, context_calls):
    generator = make_generator([valid_raw])

    generator.generate(sample_input)

    assert context_calls == ["tech"]
    assert len(generator.client.json_calls) == 1


def test_generate_sends_schema_and_feedback(make_generator, store, sample_input, sample_output, valid_raw):
    submit_feedback(store, sample_input, sample_output, "not_helpful")
    generator = make_generator([valid_raw])

    generator.generate(sample_input)

    call = generator.client.json_calls[0]
    assert "impactAnalysis" in call["schema"]["properties"]
    assert "NOT HELPFUL solutions" in call["prompt"]


def test_backend_failure_raises_backend_unavailable(make_generator, sample_input):
    generator = make_generator([LLMRuntimeError("connection reset")])

    with pytest.raises(BackendUnavailableError) as exc_info:
        generator.generate(sample_input)

    assert isinstance(exc_info.value, GenerationError)
    assert "connection reset" in exc_info.value.errors[0]


def test_misconfigured_backend_raises_backend_unavailable(make_generator, sample_input):
    generator = make_generator([LLMConfigurationError("GEMINI_API_KEY is missing")])

    with pytest.raises(BackendUnavailableError):
        generator.generate(sample_input)


def test_empty_response_raises_backend_unavailable(make_generator, sample_input):
    with pytest.raises(BackendUnavailableError):
        make_generator([""]).generate(sample_input)


def test_malformed_output_raises_schema_error(make_generator, sample_input):
    with pytest.raises(SchemaValidationError):
        make_generator(['{"solutions": "none"}']).generate(sample_input)


def test_unmatched_impact_raises_cross_reference_error(make_generator, sample_input, payload_factory, valid_payload):
    impact = [dict(entry) for entry in valid_payload["impactAnalysis"]]
    impact[0]["name"] = "Renamed Heading"
    raw = json.dumps(payload_factory(impactAnalysis=impact))

    with pytest.raises(CrossReferenceError):
        make_generator([raw]).generate(sample_input)


def test_from_config_wires_disabled_client(store):
    generator = SolutionGenerator.from_config(
        {"llm": {"enabled": False}, "context": {"delay_seconds": 0}},
        store,
    )

    assert generator.store is store
    assert generator.client.enabled is False
    assert generator.context_fetcher("tech").market_trends


def test_disabled_backend_raises_generation_error(store, sample_input):
    generator = SolutionGenerator.from_config(
        {"llm": {"enabled": False}, "context": {"delay_seconds": 0}},
        store,
    )

    with pytest.raises(BackendUnavailableError):
        generator.generate(sample_input)
