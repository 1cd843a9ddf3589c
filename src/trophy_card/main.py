from __future__ import annotations
import logging
import uvicorn
from trophy_card.infrastructure.config import get_settings

logger = logging.getLogger(__name__)

def main() -> None:
    """Configure logging and serve the trophy card API with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    if settings.github_token is None:
        logger.warning(
            "GITHUB_TOKEN is not set; %s rejects anonymous queries, so every card request will 404",
            settings.github_graphql_url,
        )
    uvicorn.run(
        "trophy_card.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
