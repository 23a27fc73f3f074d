from .shaping import (
    KpiCard,
    form_progress,
    parse_kpi,
    parse_kpis,
    impact_frame,
    stakeholder_frame,
    STAKEHOLDERS,
)
from .visuals import impact_chart, stakeholder_chart, render_dashboard_visuals

__all__ = [
    "KpiCard",
    "form_progress",
    "parse_kpi",
    "parse_kpis",
    "impact_frame",
    "stakeholder_frame",
    "STAKEHOLDERS",
    "impact_chart",
    "stakeholder_chart",
    "render_dashboard_visuals",
]
