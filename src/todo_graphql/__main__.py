import logging

import uvicorn

from todo_common.settings import get_settings

from .main import app

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Run the GraphQL Todo Service with uvicorn."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("GraphQL server is running on http://localhost:%d/graphql", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
