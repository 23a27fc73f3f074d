from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from sme_insights.dashboard import (
    STAKEHOLDERS,
    impact_chart,
    render_dashboard_visuals,
    stakeholder_chart,
)


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

@pytest.fixture
def output_dir(tmp_path):
    """
    Temporary directory for visual outputs.
    """
    return tmp_path / "visuals"


# -------------------------------------------------
# Visual Regression Tests
# -------------------------------------------------

def test_dashboard_visuals_are_generated(sample_output, output_dir):
    """
    Both dashboard charts must be rendered for a valid plan.
    """
    visuals = render_dashboard_visuals(sample_output, output_dir)

    assert len(visuals) == 2


def test_visual_files_exist_and_valid(sample_output, output_dir):
    """
    Generated chart files must exist and not be empty.
    """
    for visual in render_dashboard_visuals(sample_output, output_dir):
        path = Path(visual["path"])
        assert path.exists()
        assert path.stat().st_size > 5_000


def test_visuals_have_captions(sample_output, output_dir):
    """
    Every visual must include a human-readable caption.
    """
    for visual in render_dashboard_visuals(sample_output, output_dir):
        assert isinstance(visual["caption"], str)
        assert len(visual["caption"].strip()) > 0


def test_empty_frames_do_not_crash():
    """
    Mismatched plans can leave frames empty; charts must still render.
    """
    fig = impact_chart(pd.DataFrame(columns=["name", "projected", "worst", "best"]))
    plt.close(fig)

    fig = stakeholder_chart(pd.DataFrame(columns=STAKEHOLDERS))
    plt.close(fig)
