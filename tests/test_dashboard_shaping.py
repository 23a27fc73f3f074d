import json

import pytest

from sme_insights.dashboard import (
    STAKEHOLDERS,
    form_progress,
    impact_frame,
    parse_kpi,
    parse_kpis,
    stakeholder_frame,
)
from sme_insights.generation import parse_generation_output
from sme_insights.schemas import GenerationOutput


# -------------------------------------------------
# Form progress
# -------------------------------------------------

def test_progress_complete_form(form_data):
    assert form_progress(form_data) == 100


def test_progress_empty_form():
    assert form_progress({}) == 0


def test_progress_counts_problem_only_when_valid(form_data):
    form_data["customProblem"] = "short"
    assert form_progress(form_data) == 75


def test_progress_partial():
    assert form_progress({"industry": "retail"}) == 25
    assert form_progress({"industry": "retail", "commonProblems": ["high_costs"]}) == 50


# -------------------------------------------------
# KPI parsing
# -------------------------------------------------

@pytest.mark.parametrize(
    "text, category",
    [
        ("Repeat Purchase Rate: share of customers ordering twice", "Customer"),
        ("Employee Engagement Score: quarterly pulse survey", "People"),
        ("Revenue growth of 15% YoY", "Financial"),
        ("Waste reduction - tonnes diverted from landfill", "Sustainability"),
        ("Cost per delivery: fulfilment cost divided by orders", "Operational"),
        ("Weekly active partners on the platform", "Innovation"),
        ("Gut feeling of the founders", "General"),
    ],
)
def test_kpi_category(text, category):
    assert parse_kpi(text).category == category


def test_kpi_title_and_description_split():
    card = parse_kpi("Repeat Purchase Rate: share of customers ordering twice, target 35%")

    assert card.title == "Repeat Purchase Rate"
    assert card.description == "share of customers ordering twice, target 35%"
    assert card.target == 35.0


def test_kpi_without_separator_keeps_text_as_title():
    card = parse_kpi("Revenue growth of 12.5% YoY")

    assert card.title == "Revenue growth of 12.5% YoY"
    assert card.description == ""
    assert card.target == 12.5


@pytest.mark.parametrize(
    "text,title,description",
    [
        (
            "Year-over-Year Revenue Growth: increase in total sales, target 15%",
            "Year-over-Year Revenue Growth",
            "increase in total sales, target 15%",
        ),
        (
            "Cross-sell Rate: share of orders with a second category",
            "Cross-sell Rate",
            "share of orders with a second category",
        ),
        (
            "Waste reduction - tonnes diverted from landfill",
            "Waste reduction",
            "tonnes diverted from landfill",
        ),
    ],
)
def test_kpi_title_keeps_inner_hyphens(text, title, description):
    card = parse_kpi(text)

    assert card.title == title
    assert card.description == description


def test_kpi_target_follows_to():
    card = parse_kpi("Churn Rate: reduce churn from 20% to 10%")

    assert card.target == 10.0


def test_kpi_target_defaults_to_last_percentage():
    card = parse_kpi("Gross Margin: lift from 30% by 5%")

    assert card.target == 5.0


def test_kpi_hyphenated_title_with_target():
    card = parse_kpi("Year-over-Year Revenue Growth: increase in total sales, target 15%")

    assert card.target == 15.0
    assert card.category == "Financial"


def test_parse_kpis_skips_blank_entries():
    assert len(parse_kpis(["NPS: promoters minus detractors", "", "   "])) == 1


# -------------------------------------------------
# Chart frames
# -------------------------------------------------

def test_impact_frame_follows_solution_order(sample_output):
    frame = impact_frame(sample_output)

    assert list(frame["name"]) == sample_output.headings
    first = frame.iloc[0]
    assert (first["projected"], first["worst"], first["best"]) == (75, 60, 85)


def test_stakeholder_frame_columns(sample_output):
    frame = stakeholder_frame(sample_output)

    assert list(frame.columns) == STAKEHOLDERS
    assert list(frame.index) == sample_output.headings
    assert frame.loc[sample_output.headings[0], "Customers"] == 40


def test_frames_drop_unmatched_entries(valid_payload):
    # Built without the parser so the mismatch survives
    valid_payload["impactAnalysis"][1]["name"] = "Orphan Entry"
    output = GenerationOutput.model_validate(valid_payload)

    assert "Orphan Entry" not in list(impact_frame(output)["name"])
    assert len(impact_frame(output)) == 2
    assert len(stakeholder_frame(output)) == 2


def test_frames_from_parsed_output(valid_raw):
    output = parse_generation_output(valid_raw).output
    assert len(impact_frame(output)) == len(output.solutions)
