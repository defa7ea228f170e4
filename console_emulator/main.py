"""
Main application exposing the console emulator over HTTP, plus a small scripted demo.
"""

import logging
import sys

from fastapi import FastAPI

from console_emulator.api.routers import router as console_router
from console_emulator.config.settings import settings
from console_emulator.container import container
from console_emulator.exceptions import ConsoleInitializationError

# Create FastAPI app
app = FastAPI(title="Console Emulator API")
app.include_router(console_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level_number,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)

DEMO_COMMANDS = ("whoami", "pwd", "ls", 'echo "hello"', "cd /nonexistent", "uname")


def demonstrate_console_session(commands=DEMO_COMMANDS) -> str:
    """Run a few commands through a fresh console and log the rendered content."""
    logger.info("=" * 60)
    logger.info("CONSOLE SESSION DEMONSTRATION")
    logger.info("=" * 60)

    console = container.create_console()
    for command in commands:
        output = console.execute(command)
        logger.info(f"{command!r} -> {len(output.splitlines())} line(s) of output")

    content = console.get_content()
    for line in content.splitlines():
        logger.info(f"  {line}")
    return content


def main():
    """Main application entry point."""
    try:
        demonstrate_console_session()
    except ConsoleInitializationError as e:
        logger.error(f"Application error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
