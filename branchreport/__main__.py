"""
Command line entry point: serve the API or just initialise the schema.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from branchreport.app import create_app
from branchreport.config import get_settings
from branchreport.db import Database

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Branch report service")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("serve", "init-db"),
        default="serve",
        help="Run the HTTP server (default) or only create the schema",
    )
    parser.add_argument("--host", type=str, default=None, help="Override SERVER_HOST")
    parser.add_argument(
        "--port", type=int, default=None, help="Override SERVER_PORT / PORT"
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
    )

    if args.command == "init-db":
        database = Database(settings.database_url, echo=settings.sql_echo)
        try:
            database.init_schema()
        except Exception as exc:
            logger.error("Schema initialisation failed: %s", exc)
            return 1
        finally:
            database.dispose()
        return 0

    host = args.host or settings.server_host
    port = args.port or settings.server_port
    logger.info("Starting %s on %s:%d", settings.service_name, host, port)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
