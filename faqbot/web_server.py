"""HTTP server exposing the FAQ bot and the unanswered question log."""

import logging

from aiohttp import web

from faqbot.bot_handler import BotHandler
from faqbot.unanswered import UnansweredQuestionLog

logger = logging.getLogger(__name__)


class WebServer:
    """HTTP server for message and curation endpoints."""

    def __init__(
        self,
        handler: BotHandler,
        unanswered_log: UnansweredQuestionLog,
        port: int = 3000,
    ):
        """Initialize web server."""
        self.port = port
        self.handler = handler
        self.unanswered_log = unanswered_log
        self.app = web.Application()
        self._setup_routes()
        logger.info(f"Web server initialized on port {port}")

    def _setup_routes(self):
        """Set up HTTP routes."""
        self.app.router.add_get("/", self._handle_health)
        self.app.router.add_get("/health", self._handle_health)
        self.app.router.add_post("/api/messages", self._handle_message)
        self.app.router.add_get("/api/unanswered", self._handle_unanswered)
        logger.info("Routes configured: /, /health, /api/messages, /api/unanswered")

    async def _handle_health(self, request: web.Request) -> web.Response:
        """Health check endpoint."""
        return web.json_response({"status": "healthy", "service": "FAQBot"})

    async def _handle_message(self, request: web.Request) -> web.Response:
        """
        Answer a message.

        Expects JSON: {"message": "..."}
        """
        try:
            data = await request.json()
        except ValueError:
            return web.json_response({"error": "Request body must be JSON"}, status=400)

        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message.strip():
            return web.json_response({"error": "No message provided"}, status=400)

        try:
            reply = await self.handler.process_message(message)
        except Exception as e:
            logger.error(f"Error handling message: {e}", exc_info=True)
            return web.json_response({"error": str(e)}, status=500)

        return web.json_response({"reply": reply})

    async def _handle_unanswered(self, request: web.Request) -> web.Response:
        """List logged unanswered questions for curation."""
        try:
            entries = self.unanswered_log.entries()
        except OSError as e:
            logger.error(f"Error reading unanswered questions: {e}", exc_info=True)
            return web.json_response({"error": "Unable to read unanswered questions"}, status=500)

        return web.json_response(
            [{"timestamp": entry.timestamp.isoformat(), "message": entry.message} for entry in entries]
        )

    async def start(self):
        """Start the web server."""
        runner = web.AppRunner(self.app)
        await runner.setup()
        site = web.TCPSite(runner, "0.0.0.0", self.port)
        await site.start()
        logger.info(f"Web server started on port {self.port}")
        return runner

    async def stop(self, runner):
        """Stop the web server."""
        await runner.cleanup()
        logger.info("Web server stopped")
