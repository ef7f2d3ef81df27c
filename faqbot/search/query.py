"""Translation of free-text messages into Solr question-answering queries."""

import logging

import httpx

from faqbot.config import get_settings
from faqbot.errors import MalformedTargetError
from .models import QueryTarget

# Encoded "?" the qa parser expects at the end of every question
QUESTION_TERMINATOR = "%3F"


class QueryBuilder:
    """Builds request targets for the Solr qa request handler."""

    def __init__(
        self,
        endpoint: str | None = None,
        qa_field: str | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize query builder.

        Args:
            endpoint: Solr request handler URL, defaults to settings.solr_endpoint
            qa_field: Field the answers are matched against, defaults to settings.solr_qa_field
            logger: Logger used for observability, defaults to the module logger
        """
        settings = get_settings()
        self.endpoint = (endpoint or settings.solr_endpoint).rstrip("/")
        self.qa_field = qa_field or settings.solr_qa_field
        self.logger = logger or logging.getLogger(__name__)

    def build_token(self, message: str) -> str:
        """Make a message safe to embed as the ``q`` parameter."""
        return message.replace(" ", "+")

    def build_query(self, message: str) -> QueryTarget:
        """Build the full request target for a message.

        Args:
            message: Raw user message

        Returns:
            Query token and request URL

        Raises:
            MalformedTargetError: If the resulting URL cannot be parsed
        """
        token = self.build_token(message)
        url = (
            f"{self.endpoint}?q={token}{QUESTION_TERMINATOR}"
            f"&defType=qa&qa=true&qa.qf={self.qa_field}&wt=json"
        )

        try:
            httpx.URL(url)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            raise MalformedTargetError(f"Cannot build query URL for {message!r}: {e}") from e

        self.logger.debug(f"Querying FAQ service using URL: {url}")
        return QueryTarget(token=token, url=url)
