#!/usr/bin/env python3
"""Rainbow Snake game server - FastAPI + uvicorn"""

import argparse
import dataclasses
import logging

import uvicorn

from rainbow_snake.config import Settings
from rainbow_snake.main import create_app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve the snake game over HTTP/WebSocket")
    parser.add_argument("--host", help="interface to bind (default: $SNAKE_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="port to listen on (default: $SNAKE_PORT or 8765)")
    parser.add_argument("--store", help="high score file (default: $SNAKE_STORE_PATH)")
    parser.add_argument("--log-level", help="logging level (default: $SNAKE_LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def build_settings(args) -> Settings:
    settings = Settings.from_env()
    overrides = {
        "host": args.host,
        "port": args.port,
        "store_path": args.store,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv=None):
    settings = build_settings(parse_args(argv))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logging.getLogger(__name__).info(
        "Snake server starting on http://localhost:%d (%dx%d grid)",
        settings.port, *settings.grid_size,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
