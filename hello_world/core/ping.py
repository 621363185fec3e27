"""Ping utility backing the ``/ping`` route."""

PING_BODY = "ping: pong"


def get_ping_message() -> str:
    """Return the static ping message."""
    return PING_BODY
