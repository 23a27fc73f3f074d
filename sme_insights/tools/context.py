"""
Contextual data for prompt grounding.

Simulated market trends and economic outlook. The table stands
in for an external market-data API; lookups never fail.
"""

import logging
import time
from typing import Dict, List

from sme_insights.schemas import ContextualData

logger = logging.getLogger(__name__)


MARKET_TRENDS: Dict[str, List[str]] = {
    "tech": [
        "AI Integration is booming",
        "Cybersecurity is a top priority",
        "Sustainable tech is gaining traction",
    ],
    "retail": [
        "Personalized shopping experiences are key",
        "Social commerce is on the rise",
        "Supply chain resilience is crucial",
    ],
    "health": [
        "Telehealth is becoming standard",
        "Focus on preventative care is increasing",
        "Mental health support is a major growth area",
    ],
    "default": [
        "Digital transformation is essential across all sectors",
        "Inflation is impacting consumer spending",
        "Data privacy regulations are tightening",
    ],
}

ECONOMIC_OUTLOOK: Dict[str, str] = {
    "current": "stable with cautious optimism",
    "prediction": "slow growth over the next quarter",
}


def fetch_contextual_data(industry: str, delay: float = 0.5) -> ContextualData:
    """
    Market trends for an industry key plus the shared economic outlook.
    Unknown industries get the default trend set.
    """
    key = (industry or "").strip().lower()
    logger.info("Fetching contextual data for industry: %s", key or "<none>")

    if delay > 0:
        time.sleep(delay)

    trends = MARKET_TRENDS.get(key, MARKET_TRENDS["default"])

    return ContextualData(
        market_trends=list(trends),
        economic_outlook=dict(ECONOMIC_OUTLOOK),
    )
