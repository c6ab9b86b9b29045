"""Conector Slack: único ponto de IO com a Slack Web API."""

from .client import SlackHttpClient, create_slack_client

__all__ = [
    "SlackHttpClient",
    "create_slack_client",
]
