"""Run the Reddit API service with uvicorn."""

import uvicorn

from reddit_api.api.main import create_app
from reddit_api.config.settings import settings
from reddit_api.utils.logging_utils import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run(
        create_app(),
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
