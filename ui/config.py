"""
UI defaults for SME Insights Navigator
Purely presentation-level config
"""

APP_NAME = "SME Insights Navigator"
APP_TAGLINE = "Describe your business challenges and get AI-powered solutions."

CONFIG_PATH_ENV = "SME_CONFIG"

LOADING_TEXT = "Generating your solutions..."

CONTEXT_PLACEHOLDER = (
    "e.g., We are a small e-commerce business selling handmade jewelry. "
    "Our revenue has been flat for the last 6 months."
)
PROBLEM_PLACEHOLDER = (
    "Describe your primary goal, main operational issue, key market concern, etc."
)
