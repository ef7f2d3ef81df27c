"""Main entry point for the FAQ bot."""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from faqbot.config import get_settings
from faqbot.dialog import DialogController
from faqbot.slack import FAQSlackBot
from faqbot.web_server import WebServer

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Starting FAQ bot in {settings.environment.value} mode")
    logger.info(f"Using FAQ service at {settings.solr_endpoint}")

    try:
        settings.validate_slack_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    controller = DialogController()
    controller.init()

    web_server = WebServer(
        handler=controller,
        unanswered_log=controller.unanswered_log,
        port=settings.web_port,
    )
    web_runner = await web_server.start()

    try:
        if settings.slack_enabled:
            bot = FAQSlackBot(handler=controller)
            await asyncio.gather(
                bot.start(),
                asyncio.Event().wait()  # Keep web server running
            )
        else:
            logger.info("Slack tokens not configured, serving HTTP only")
            await asyncio.Event().wait()
    finally:
        logger.info("Shutting down...")
        await web_server.stop(web_runner)
        await controller.transport.aclose()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
