"""
Errors raised while answering a message.

All of them are caught by the dialog controller and turned into a
user-facing "Unable to process" reply; operators get the details in the log.
"""


class FAQBotError(Exception):
    """Base class for failures while querying the FAQ backend."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedTargetError(FAQBotError):
    """Raised when a message produces a request URL that cannot be parsed."""


class BackendUnavailableError(FAQBotError):
    """Raised on connection failures, timeouts, or a non-200 status from Solr."""


class MalformedResponseError(FAQBotError):
    """Raised when Solr returns invalid JSON or a document without required fields."""
