"""Reshaping of Solr qa responses into question/answer pairs."""

import json
import logging

from pydantic import ValidationError

from faqbot.errors import MalformedResponseError
from .models import SearchDocument

# Top-level field holding the matched documents
RESPONSE_FIELD = "response"


class ResponseReconciler:
    """Parses one Solr response unit into an ordered question -> answer mapping."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, response_body: str) -> dict[str, str]:
        """Parse a single JSON response unit.

        Documents keep the order Solr returned them in. When two documents
        share a ``docid`` the later one replaces the earlier one but keeps
        its position. When documents with different ids share a title, the
        later question is tagged with its docid, e.g. ``"Question: Leave? [2]"``.

        Args:
            response_body: One self-contained JSON object from Solr

        Returns:
            Mapping of "Question: ..." to "Answer: ...", empty when nothing matched

        Raises:
            MalformedResponseError: If the body is not a JSON object or a document is incomplete
        """
        try:
            root = json.loads(response_body)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Invalid JSON from FAQ service: {e}") from e

        if not isinstance(root, dict):
            raise MalformedResponseError(
                f"Expected a JSON object from FAQ service, got {type(root).__name__}"
            )

        container = root.get(RESPONSE_FIELD)
        if not container:
            return {}
        if not isinstance(container, dict):
            raise MalformedResponseError(f"'{RESPONSE_FIELD}' field is not an object")

        raw_docs = container.get("docs") or []
        if not isinstance(raw_docs, list):
            raise MalformedResponseError(f"'{RESPONSE_FIELD}.docs' field is not an array")

        pairs: dict[int, tuple[str, str]] = {}
        for raw_doc in raw_docs:
            try:
                doc = SearchDocument.model_validate(raw_doc)
            except ValidationError as e:
                raise MalformedResponseError(f"Incomplete document in FAQ response: {e}") from e

            if doc.docid in pairs:
                self.logger.warning(f"Duplicate docid {doc.docid} in FAQ response, keeping the last one")
            pairs[doc.docid] = (doc.question, doc.answer)

        result: dict[str, str] = {}
        for docid, (question, answer) in pairs.items():
            if question in result:
                self.logger.warning(
                    f"Docid {docid} repeats question {question!r} in FAQ response, tagging it with its docid"
                )
                question = f"{question} [{docid}]"
            result[question] = answer
        return result
