"""Tests for configuration module."""

from pathlib import Path

import pytest

from faqbot.config import Environment, Settings


def test_default_settings():
    """Test that default settings are loaded correctly."""
    settings = Settings(_env_file=None)

    assert settings.environment == Environment.DEVELOPMENT
    assert settings.log_level == "INFO"
    assert settings.solr_host == "localhost"
    assert settings.solr_port == 8983
    assert settings.solr_collection == "answer"
    assert settings.solr_qa_field == "doctitle"
    assert settings.request_timeout == 10.0
    assert settings.unanswered_questions_path == Path("./unanswered_questions.txt")
    assert settings.slack_enabled is False


def test_solr_endpoint():
    """Test Solr endpoint construction."""
    settings = Settings(
        _env_file=None,
        solr_host="solr",
        solr_port=8080,
        solr_collection="faq",
    )

    assert settings.solr_endpoint == "http://solr:8080/solr/faq"


def test_request_timeout_must_be_positive():
    """Test that a zero timeout is rejected."""
    with pytest.raises(ValueError):
        Settings(_env_file=None, request_timeout=0)


def test_validate_partial_slack_config():
    """Test Slack configuration validation with a single token."""
    settings = Settings(_env_file=None, slack_bot_token="xoxb-test")

    with pytest.raises(ValueError, match="Both SLACK_BOT_TOKEN and SLACK_APP_TOKEN"):
        settings.validate_slack_config()


def test_valid_slack_config():
    """Test valid Slack configuration."""
    settings = Settings(
        _env_file=None,
        slack_bot_token="xoxb-test",
        slack_app_token="xapp-test",
    )

    # Should not raise
    settings.validate_slack_config()
    assert settings.slack_enabled is True
