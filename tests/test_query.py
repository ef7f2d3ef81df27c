"""Tests for Solr query building."""

from unittest.mock import MagicMock

import pytest

from faqbot.errors import MalformedTargetError
from faqbot.search import QueryBuilder, QueryTarget

ENDPOINT = "http://localhost:8983/solr/answer"


@pytest.fixture
def builder():
    """Create a query builder with a fixed endpoint."""
    return QueryBuilder(endpoint=ENDPOINT, qa_field="doctitle")


def test_build_query(builder):
    """Test the full request target for a multi-word message."""
    target = builder.build_query("what is the leave policy")

    assert isinstance(target, QueryTarget)
    assert target.token == "what+is+the+leave+policy"
    assert target.url == (
        "http://localhost:8983/solr/answer?q=what+is+the+leave+policy%3F"
        "&defType=qa&qa=true&qa.qf=doctitle&wt=json"
    )


@pytest.mark.parametrize(
    "message",
    ["leave policy", "  leading and trailing  ", "double  space", "single", ""],
)
def test_query_has_no_spaces(builder, message):
    """Test that built queries never contain a raw space."""
    target = builder.build_query(message)

    assert " " not in target.token
    assert " " not in target.url


def test_token_is_stable_on_space_free_input(builder):
    """Test that rebuilding from a token gives back the same token."""
    token = builder.build_query("how do I book travel").token

    assert builder.build_query(builder.build_token(token)).token == token


def test_trailing_slash_in_endpoint():
    """Test that a trailing slash on the endpoint is ignored."""
    builder = QueryBuilder(endpoint=ENDPOINT + "/")

    assert builder.build_query("x").url.startswith(ENDPOINT + "?q=x%3F")


def test_custom_qa_field():
    """Test that the qa field parameter is configurable."""
    builder = QueryBuilder(endpoint=ENDPOINT, qa_field="question")

    assert "&qa.qf=question&" in builder.build_query("x").url


def test_control_characters_are_rejected(builder):
    """Test that unparseable targets raise MalformedTargetError."""
    with pytest.raises(MalformedTargetError, match="Cannot build query URL"):
        builder.build_query("what\tis this")


def test_target_is_logged():
    """Test that the built target is logged for observability."""
    logger = MagicMock()
    builder = QueryBuilder(endpoint=ENDPOINT, logger=logger)

    target = builder.build_query("leave policy")

    logger.debug.assert_called_once()
    assert target.url in logger.debug.call_args[0][0]


def test_unencodable_characters_are_rejected(builder):
    """Test that a lone surrogate raises MalformedTargetError."""
    with pytest.raises(MalformedTargetError, match="Cannot build query URL"):
        builder.build_query("leave \ud800 policy")
