"""
Command line entry point.

Usage:
    python -m shortlink [--server-name URL] [--secret S] [--space N]
                        [--host H] [--port P] [--storage-file PATH]

Flags override the environment / .env settings.
"""

import argparse

import uvicorn

from shortlink.core.logging_config import setup_logging
from shortlink.core.setting import Settings
from shortlink.main import create_app

# flag -> Settings field
FLAG_FIELDS = {
    "server_name": "SERVER_NAME",
    "secret": "SECRET",
    "space": "SLUG_LENGTH",
    "host": "HOST",
    "port": "PORT",
    "storage_file": "STORAGE_FILE",
    "log_level": "LOG_LEVEL",
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shortlink",
        description="Minimal URL shortening service. Run it behind a TLS terminating reverse proxy.",
    )
    parser.add_argument("--server-name", help="Public name of the service, including protocol and optionally port")
    parser.add_argument("--secret", help="Secret that has to be submitted to create a new short URL")
    parser.add_argument("--space", type=int, help="Number of characters for generated slugs, using a-zA-Z0-9")
    parser.add_argument("--host", help="Host to listen for connections")
    parser.add_argument("--port", type=int, help="Port to listen for connections")
    parser.add_argument(
        "--storage-file",
        help="File storing all shortened URLs. Read at startup, rewritten on every new URL",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with every given flag applied on top."""
    overrides = {
        field: getattr(args, flag)
        for flag, field in FLAG_FIELDS.items()
        if getattr(args, flag) is not None
    }
    return Settings(**overrides)


def main(argv=None) -> None:
    config = build_settings(parse_args(argv))
    setup_logging(config.LOG_LEVEL)

    uvicorn.run(
        create_app(config),
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
