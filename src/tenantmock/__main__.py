"""Run the tenant translator mock: python -m tenantmock"""

import logging
import sys

import uvicorn

from tenantmock.app import create_app
from tenantmock.config import load_config

logger = logging.getLogger("tenantmock")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    try:
        config = load_config()
        logging.getLogger().setLevel(config.log_level)
        logger.info('Listening on "%s:%d"...', config.host, config.port)
        uvicorn.run(
            create_app(config),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    except Exception:
        logger.critical("Server stopped", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
