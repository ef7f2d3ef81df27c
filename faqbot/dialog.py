"""FAQ dialog controller: greeting detection and Solr-backed answers."""

import logging
from contextlib import aclosing
from pathlib import Path

from faqbot.bot_handler import BotHandler, BotId
from faqbot.config import get_settings
from faqbot.errors import FAQBotError
from faqbot.search import QueryBuilder, ResponseReconciler, SolrTransport
from faqbot.unanswered import UnansweredQuestionLog

GREETINGS = ("hi", "hello")
GREETING_REPLY = (
    "! I am FAQBot and can help you find answers for FAQs. "
    "Please enter your question or partial question with keywords. "
)
NO_ANSWER_REPLY = "No answer found for your question. Please contact admin."
FAILURE_REPLY_PREFIX = "Unable to process :"


class DialogController(BotHandler):
    """Answers user messages from the Solr FAQ collection."""

    def __init__(
        self,
        query_builder: QueryBuilder | None = None,
        transport: SolrTransport | None = None,
        reconciler: ResponseReconciler | None = None,
        unanswered_log: UnansweredQuestionLog | None = None,
        unanswered_questions_path: Path | str | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize dialog controller.

        Args:
            query_builder: Builds Solr request targets
            transport: Sends requests to Solr
            reconciler: Turns Solr responses into question/answer pairs
            unanswered_log: Where unanswered questions are recorded
            unanswered_questions_path: Log file path when unanswered_log is omitted,
                defaults to settings.unanswered_questions_path
            logger: Logger used for observability, defaults to the module logger
        """
        self.logger = logger or logging.getLogger(__name__)
        self.query_builder = query_builder or QueryBuilder(logger=logger)
        self.transport = transport or SolrTransport(logger=logger)
        self.reconciler = reconciler or ResponseReconciler(logger=logger)
        self.unanswered_log = unanswered_log or UnansweredQuestionLog(
            unanswered_questions_path or get_settings().unanswered_questions_path,
            logger=logger,
        )

    def init(self) -> None:
        self.logger.info(
            f"FAQ dialog controller ready, unanswered questions go to {self.unanswered_log.path}"
        )

    @property
    def bot_id(self) -> BotId:
        return BotId.FAQ

    async def process_message(self, message: str) -> str:
        """Answer a message with the matching FAQ entries.

        Greetings are answered locally. Any failure to query or parse the
        FAQ service is logged and reported back as a plain reply.

        Args:
            message: Raw user message

        Returns:
            Formatted reply
        """
        self.logger.debug(f"Processing message: {message}")

        if message.strip().lower() in GREETINGS:
            return message.strip() + GREETING_REPLY

        try:
            result = await self._query_faq_service(message)
        except FAQBotError as e:
            self.logger.error(f"Error while processing message {message!r}: {e.message}", exc_info=True)
            result = FAILURE_REPLY_PREFIX + message

        self.logger.debug(f"Returning result: {result}")
        return result

    async def _query_faq_service(self, original_message: str) -> str:
        target = self.query_builder.build_query(original_message)

        parts: list[str] = []
        units_seen = 0
        async with aclosing(self.transport.fetch(target)) as units:
            async for unit in units:
                units_seen += 1
                qna = self.reconciler.parse(unit)
                self.logger.debug(f"Parsed reply from FAQ service: {qna}")

                if not qna:
                    self._no_answer(original_message, parts)
                    continue

                for question, answer in qna.items():
                    parts.append(f"\n{question}\n{answer}\n")

        if units_seen == 0:
            self.logger.warning("FAQ service returned an empty body")
            self._no_answer(original_message, parts)

        return "".join(parts)

    def _no_answer(self, original_message: str, parts: list[str]) -> None:
        parts.append(NO_ANSWER_REPLY)
        try:
            self.unanswered_log.record(original_message)
        except OSError as e:
            self.logger.error(f"Failed to log unanswered question {original_message!r}: {e}", exc_info=True)
