"""Typer app configuration and logging setup."""

from __future__ import annotations

import asyncio
import logging
import sys
import warnings

import typer
from dotenv import load_dotenv

from ..constants import AI_CALLS_LOG_FILE, LOG_DIR

# Load environment variables from .env file
load_dotenv()

# httpx cleanup noise when the loop closes
warnings.filterwarnings("ignore", message=".*Event loop is closed.*")

if sys.platform == "win32":
    try:
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    except AttributeError:
        pass  # Policy not available in this Python version

# Create Typer app
app = typer.Typer(
    name="link2ink",
    help="Turn articles, documents, text, YouTube videos and GitHub repos into infographics",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    # Infographic commands
    from .infographic.commands import article, edit, file, text, youtube

    app.command(name="article")(article)
    app.command(name="text")(text)
    app.command(name="file")(file)
    app.command(name="youtube")(youtube)
    app.command(name="edit")(edit)

    # Repository commands
    from .repo.commands import ask, repo, repo_3d

    app.command(name="repo")(repo)
    app.command(name="repo-3d")(repo_3d)
    app.command(name="ask")(ask)

    # Credential commands
    from .credential.commands import credential_app

    app.add_typer(credential_app, name="credential")


def setup_logging() -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sends AI request/response logging to logs/ai_calls.log
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "google_genai", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    # ai_calls logger gets full request/response logging
    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(LOG_DIR / AI_CALLS_LOG_FILE, encoding="utf-8")
    ai_file_handler.setLevel(logging.DEBUG)
    ai_file_handler.setFormatter(formatter)
    ai_calls_logger.addHandler(ai_file_handler)

    # Credential and source lookups share the same file, never the console
    app_logger = logging.getLogger("link2ink")
    app_logger.setLevel(logging.INFO)
    app_logger.propagate = False
    app_logger.handlers = [ai_file_handler]


# Initialize logging on module import
setup_logging()

# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
