"""Slack integration module."""

from .bot import FAQSlackBot

__all__ = ["FAQSlackBot"]
