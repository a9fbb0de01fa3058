"""
Start the norwegian-tin validation API (``api.main:app``) under uvicorn.

Usage:
    uv run python main.py
    uv run python main.py --host 0.0.0.0 --port 8080 --reload

API_KEY, CORS_ORIGINS and LOG_LEVEL are read from the environment; LOG_LEVEL
also sets uvicorn's own log level unless --log-level is given.
"""

from __future__ import annotations

import argparse
import os

import uvicorn

_LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Serve /validate and /scan for Norwegian identifiers"
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (single worker)"
    )
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "info").lower(),
        choices=_LOG_LEVELS,
        help="Log level for uvicorn and the API (default: $LOG_LEVEL or info)",
    )
    args = parser.parse_args()

    # The API configures its logger from LOG_LEVEL in its lifespan.
    os.environ["LOG_LEVEL"] = args.log_level.upper()

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1 if args.reload else args.workers,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
