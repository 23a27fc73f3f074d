import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sme_insights.config import load_config
from sme_insights.feedback import FeedbackStore, build_feedback_store
from sme_insights.generation import SolutionGenerator
from sme_insights.session import AdvisorSession
from sme_insights.utils.logger import configure_logging

from ui.config import CONFIG_PATH_ENV


@dataclass
class Services:
    config: Dict[str, Any]
    store: FeedbackStore
    generator: SolutionGenerator


def build_services(config_path: Optional[str] = None) -> Services:
    """
    Process-level wiring: one feedback store and one generator
    shared by every browser session.
    """
    config = load_config(config_path or os.getenv(CONFIG_PATH_ENV))

    logger = configure_logging(config.get("logging", {}).get("level", "INFO"))
    logger.info(
        "Starting with provider=%s feedback=%s",
        config["llm"].get("provider"),
        config["feedback"].get("backend"),
    )

    store = build_feedback_store(config)
    generator = SolutionGenerator.from_config(config, store)

    return Services(config=config, store=store, generator=generator)


def new_session(services: Services) -> AdvisorSession:
    return AdvisorSession(
        generator=services.generator,
        store=services.store,
        min_problem_length=int(services.config["form"].get("min_problem_length", 10)),
    )
