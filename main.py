#!/usr/bin/env python3
"""
Entry point for the storefront basket API
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from storefront.config import get_config
from storefront.container import StorefrontController
from storefront.infrastructure.logging import ProductionLogger
from storefront.presentation.web import create_app


def run_server():
    """Serve the API with uvicorn"""
    import uvicorn

    ProductionLogger.setup_logging()
    logger = logging.getLogger(__name__)

    config = get_config()
    logger.info("Configuration loaded successfully")

    app = create_app(StorefrontController(config))

    logger.info("Starting FastAPI server on %s:%s", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def main():
    """Main entry point"""
    print("🚀 Starting storefront basket API...")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    print(f"Data source: {os.getenv('DATA_SOURCE', 'data')}")

    try:
        run_server()
    except Exception as e:
        logging.getLogger(__name__).error("Failed to start server: %s", e, exc_info=True)
        print(f"❌ Failed to start server: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
