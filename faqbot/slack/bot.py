"""Slack bot implementation using Slack Bolt framework."""

import logging
from typing import Any

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.app.async_app import AsyncApp
from slack_bolt.context.ack.async_ack import AsyncAck
from slack_bolt.context.respond.async_respond import AsyncRespond
from slack_bolt.context.say.async_say import AsyncSay

from faqbot.bot_handler import BotHandler
from faqbot.config import get_settings

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "🤖 *FAQBot* - answers from the FAQ knowledge base\n\n"
    "*Available Commands:*\n"
    "• `/faq [question]` - Ask a question\n"
    "• `/faq_help` - Show this help message\n\n"
    "*Tips:*\n"
    "• A partial question with keywords works too\n"
    "• You can also mention me directly or send me a DM\n"
    "• Questions I can't answer are passed on to the FAQ admins"
)


class FAQSlackBot:
    """Slack front-end that forwards messages to a bot handler."""

    def __init__(self, handler: BotHandler, app: AsyncApp | None = None):
        """Initialize the Slack bot.

        Args:
            handler: Bot handler answering the messages
            app: Slack app, created from settings.slack_bot_token when omitted
        """
        self.settings = get_settings()
        self.handler = handler
        self.app = app or AsyncApp(token=self.settings.slack_bot_token)

        self._register_handlers()

        logger.info(f"Slack bot initialized for handler {handler.bot_id.value}")

    def _register_handlers(self):
        """Register Slack event handlers."""
        self.app.command("/faq")(self._handle_ask_command)
        self.app.command("/faq_help")(self._handle_help_command)
        self.app.event("app_mention")(self._handle_app_mention)
        self.app.event("message")(self._handle_direct_message)

    async def _answer(self, text: str) -> str:
        try:
            return await self.handler.process_message(text)
        except Exception as e:
            logger.error(f"Error answering Slack message: {e}", exc_info=True)
            return "❌ Sorry, I encountered an error. Please try again later."

    async def _handle_ask_command(
        self,
        ack: AsyncAck,
        command: dict[str, Any],
        respond: AsyncRespond,
    ):
        """Handle /faq slash command."""
        await ack()

        question = command.get("text", "").strip()
        if not question:
            await respond("Please provide a question. Usage: `/faq [your question]`")
            return

        logger.info(f"User {command.get('user_id')} asked: {question}")
        await respond(await self._answer(question))

    async def _handle_help_command(
        self,
        ack: AsyncAck,
        command: dict[str, Any],
        respond: AsyncRespond,
    ):
        """Handle /faq_help slash command."""
        await ack()
        await respond(HELP_TEXT)

    async def _handle_app_mention(
        self,
        event: dict[str, Any],
        say: AsyncSay,
    ):
        """Handle app mentions."""
        text = event.get("text", "")

        # Remove the bot mention from the text
        question = text.split(">", 1)[-1].strip()

        if not question:
            await say("Hi! Ask me a question from the FAQs. Use `/faq_help` for more info.")
            return

        logger.info(f"User {event.get('user')} mentioned bot with: {question}")
        await say(await self._answer(question))

    async def _handle_direct_message(
        self,
        event: dict[str, Any],
        say: AsyncSay,
    ):
        """Handle direct messages."""
        # Skip messages from bots
        if event.get("bot_id"):
            return

        if event.get("channel_type") != "im":
            return

        text = event.get("text", "").strip()
        if not text:
            return

        logger.info(f"User {event.get('user')} sent DM: {text}")

        if text.lower() in ["help", "/help"]:
            await say(HELP_TEXT)
            return

        await say(await self._answer(text))

    async def start(self):
        """Start the Slack bot in Socket Mode."""
        logger.info("Starting FAQ Slack bot...")
        handler = AsyncSocketModeHandler(self.app, self.settings.slack_app_token)
        await handler.start_async()
