import copy
import json

import pytest

from sme_insights.feedback import InMemoryFeedbackStore
from sme_insights.generation import SolutionGenerator
from sme_insights.schemas import GenerationInput, GenerationOutput
from sme_insights.tools import fetch_contextual_data


HEADINGS = [
    "Loyalty Loop Reinvention",
    "Community Co-Creation Hub",
    "Subscription Rescue Bundles",
]


class FakeLLMClient:
    """
    Records prompts and returns canned responses in order.
    An Exception instance in the queue is raised instead.
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.json_calls = []
        self.text_calls = []

    def _next(self):
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def generate_json(self, prompt, schema, system=None):
        self.json_calls.append({"prompt": prompt, "schema": schema, "system": system})
        return self._next()

    def generate(self, prompt, system=None):
        self.text_calls.append({"prompt": prompt, "system": system})
        return self._next()


@pytest.fixture
def form_data():
    return {
        "industry": "tech",
        "businessContext": "B2C subscription app for home cooks.",
        "commonProblems": ["low_sales"],
        "customProblem": "Our repeat purchase rate has fallen 20% this quarter.",
    }


@pytest.fixture
def sample_input():
    return GenerationInput(
        industry="tech",
        business_context="B2C subscription app for home cooks.",
        common_problems=("Low Sales / Revenue",),
        custom_problem="Our repeat purchase rate has fallen 20% this quarter.",
    )


@pytest.fixture
def valid_payload():
    """
    Deterministic backend payload matching the output contract.
    """
    return {
        "solutions": [
            {
                "heading": heading,
                "description": [f"{heading} step one", f"{heading} step two"],
                "implementationCost": cost,
                "timeToValue": ttv,
                "requiredResources": ["Marketing lead", "CRM tooling"],
            }
            for heading, cost, ttv in zip(
                HEADINGS,
                ["Low", "Medium", "High"],
                ["Immediate", "Short-term", "Long-term"],
            )
        ],
        "kpis": [
            "Repeat Purchase Rate: share of customers ordering twice, target 35%",
            "Employee Engagement Score: quarterly pulse survey",
        ],
        "impactAnalysis": [
            {
                "name": heading,
                "projectedImpact": impact,
                "confidenceInterval": [impact - 15, impact + 10],
                "stakeholderValueDistribution": {
                    "Customers": 40, "Business": 35, "Employees": 15, "Community": 10,
                },
            }
            for heading, impact in zip(HEADINGS, [75, 60, 50])
        ],
        "dataNarrative": "Implementing the Loyalty Loop Reinvention will likely lift impact to 75%.",
    }


@pytest.fixture
def valid_raw(valid_payload):
    return json.dumps(valid_payload)


@pytest.fixture
def sample_output(valid_payload):
    return GenerationOutput.model_validate(valid_payload)


@pytest.fixture
def payload_factory(valid_payload):
    def make(**overrides):
        payload = copy.deepcopy(valid_payload)
        payload.update(overrides)
        return payload
    return make


@pytest.fixture
def store():
    return InMemoryFeedbackStore()


@pytest.fixture
def context_calls():
    return []


@pytest.fixture
def make_generator(store, context_calls):
    def make(responses):
        def fetch(industry):
            context_calls.append(industry)
            return fetch_contextual_data(industry, delay=0)

        return SolutionGenerator(
            client=FakeLLMClient(responses),
            store=store,
            context_fetcher=fetch,
        )
    return make


@pytest.fixture
def fake_client():
    """Factory: fake_client([responses...])"""
    return FakeLLMClient
