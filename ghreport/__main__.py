import asyncio
import logging
import sys

import pydantic

import ghreport.app as app

logger = logging.getLogger(__name__)


async def main() -> int:
    try:
        settings = app.Settings()  # pyright: ignore[reportCallIssue]
    except pydantic.ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    application = app.Application.from_settings(settings=settings)

    try:
        await application.start()
    except app.ApplicationError as e:
        logger.error("Application has failed: %s", e.message)
        return 1
    finally:
        await application.dispose()

    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
