DEFAULT_CONFIG = {
    # -----------------------------
    # AI BACKEND
    # -----------------------------
    "llm": {
        "enabled": True,
        "provider": "gemini",      # gemini | openai
        "model": None,             # provider default when None
        "temperature": 0.7,
        "max_tokens": 4096,
    },

    # -----------------------------
    # CONTEXTUAL DATA TOOL
    # -----------------------------
    "context": {
        "delay_seconds": 0.5,      # simulated market-data latency
    },

    # -----------------------------
    # FEEDBACK STORE
    # -----------------------------
    # memory: lost on restart
    # sqlite: persisted to db_path
    "feedback": {
        "backend": "memory",
        "db_path": "data/feedback.db",
    },

    # -----------------------------
    # FORM VALIDATION
    # -----------------------------
    "form": {
        "min_problem_length": 10,
    },

    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
    },
}
