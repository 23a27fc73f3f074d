from .context import fetch_contextual_data, MARKET_TRENDS, ECONOMIC_OUTLOOK

__all__ = ["fetch_contextual_data", "MARKET_TRENDS", "ECONOMIC_OUTLOOK"]
