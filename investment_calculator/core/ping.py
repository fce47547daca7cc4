"""Ping utility used by the API health-check."""

from investment_calculator.core.projection import MAX_AGE


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def get_ping_payload() -> dict:
    """Ping message plus the age ceiling the engine is running with."""
    return {"message": get_ping_message(), "maxAge": MAX_AGE}
