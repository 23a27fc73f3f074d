import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from sme_insights.schemas import GenerationOutput
from .shaping import STAKEHOLDERS, impact_frame, stakeholder_frame


def _short(label: str, width: int = 24) -> str:
    return label if len(label) <= width else label[: width - 1] + "…"


def _finish(fig, output_path: Optional[Path]):
    fig.tight_layout()
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path)
    return fig


def impact_chart(frame: pd.DataFrame, output_path: Optional[Path] = None):
    """
    Projected impact per solution with the confidence
    interval drawn as asymmetric error bars.
    """
    fig, ax = plt.subplots(figsize=(7, 4))

    if frame.empty:
        ax.text(0.5, 0.5, "No impact data", ha="center", va="center")
        ax.set_axis_off()
        return _finish(fig, output_path)

    lower = (frame["projected"] - frame["worst"]).clip(lower=0)
    upper = (frame["best"] - frame["projected"]).clip(lower=0)

    ax.bar(
        [_short(n) for n in frame["name"]],
        frame["projected"],
        yerr=[lower, upper],
        capsize=6,
        alpha=0.8,
    )
    ax.set_ylim(0, 100)
    ax.set_ylabel("Projected Impact")
    ax.set_title("Projected Impact & Confidence Range")
    ax.tick_params(axis="x", labelrotation=20)

    return _finish(fig, output_path)


def stakeholder_chart(frame: pd.DataFrame, output_path: Optional[Path] = None):
    """Stacked stakeholder value distribution per solution."""
    fig, ax = plt.subplots(figsize=(7, 4))

    if frame.empty:
        ax.text(0.5, 0.5, "No stakeholder data", ha="center", va="center")
        ax.set_axis_off()
        return _finish(fig, output_path)

    labels = [_short(n) for n in frame.index]
    bottom = [0.0] * len(frame)

    for stakeholder in STAKEHOLDERS:
        values = frame[stakeholder].tolist()
        ax.bar(labels, values, bottom=bottom, label=stakeholder)
        bottom = [b + v for b, v in zip(bottom, values)]

    ax.set_ylabel("Value Share")
    ax.set_title("Stakeholder Value Distribution")
    ax.legend(loc="upper right", fontsize=8)
    ax.tick_params(axis="x", labelrotation=20)

    return _finish(fig, output_path)


def render_dashboard_visuals(output: GenerationOutput, output_dir: Path) -> List[Dict]:
    """
    Save both charts as PNGs. Returns [{path, caption}] in the
    same shape the report layer uses for visuals.
    """
    output_dir = Path(output_dir)
    visuals = []

    charts = [
        (impact_chart, impact_frame(output), "impact.png",
         "Projected impact per solution with worst/best case range"),
        (stakeholder_chart, stakeholder_frame(output), "stakeholders.png",
         "How the value of each solution is shared across stakeholders"),
    ]

    for draw, frame, filename, caption in charts:
        path = output_dir / filename
        fig = draw(frame, output_path=path)
        plt.close(fig)
        visuals.append({"path": path, "caption": caption})

    return visuals
