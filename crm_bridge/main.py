"""CRM Bridge entry point: load settings, configure logging, run the stdio server.

Invariants:
    - Missing credentials stop the process (exit 1) before any tool is served
    - Logging goes to stderr; stdout belongs to the MCP protocol
"""

import asyncio
import logging
import sys

from crm_bridge.config import load_settings
from crm_bridge.core.errors import ConfigurationError
from crm_bridge.infrastructure.observability import setup_logging
from crm_bridge.server import serve

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.critical(e.message, extra={"error_code": e.code})
        sys.exit(1)
    setup_logging(settings.log_level, settings.log_format)
    logger.info("CRM bridge starting")
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("CRM bridge shutting down")


if __name__ == "__main__":
    main()
