import copy
import os
from pathlib import Path

import yaml

from .defaults import DEFAULT_CONFIG


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "SME_LLM_PROVIDER": ("llm", "provider"),
    "SME_LLM_MODEL": ("llm", "model"),
    "SME_FEEDBACK_BACKEND": ("feedback", "backend"),
}


def load_config(path: str | None = None) -> dict:
    """
    Load and merge user config with application defaults.

    Rules:
    - Defaults always win if the user omits fields
    - Every section is optional in the YAML file
    - Environment overrides are applied last
    """

    # -------------------------------------------------
    # 1️⃣ Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    # -------------------------------------------------
    # 2️⃣ Merge with defaults (section by section)
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    # -------------------------------------------------
    # 3️⃣ Environment overrides
    # -------------------------------------------------
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config.setdefault(section, {})[key] = value

    return config
