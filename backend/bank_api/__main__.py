# bank_api/__main__.py
"""Run the API server: ``python -m bank_api [--seed]``."""
from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("uvicorn.error")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bank account REST API")
    parser.add_argument("--seed", action="store_true", help="seed the database with demo accounts")
    args = parser.parse_args(argv)

    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path or not load_dotenv(dotenv_path):
        logging.basicConfig(level=logging.INFO)
        logger.critical("Error loading .env file: none found from the working directory upwards")
        sys.exit(1)

    # Settings read the environment at import time, so import after .env is loaded
    from bank_api.config import settings

    logging.basicConfig(level=settings.log_level.upper())
    settings.seed_demo_accounts = args.seed

    from bank_api.main import app

    logger.info("Server is running on port: %s", settings.port)
    # uvicorn exits with status 3 when the startup hook fails
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
