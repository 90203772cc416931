"""Shared CLI setup: configuration from env + flags, and logging."""

import argparse
import logging
import sys

from watchclub.config import ClientConfig
from watchclub.errors import ConfigurationError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def load_config(args: argparse.Namespace, **overrides: object) -> ClientConfig:
    """``ClientConfig.from_env()`` with the global CLI options applied.

    Exits with status 2 on an invalid setting.
    """
    if getattr(args, "api_url", None):
        overrides["api_url"] = args.api_url
    if getattr(args, "storage", None):
        overrides["storage_path"] = args.storage
    if getattr(args, "log_level", None):
        overrides["log_level"] = args.log_level.lower()
    try:
        config = ClientConfig.from_env(**overrides)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    configure_logging(config)
    return config


def configure_logging(config: ClientConfig) -> None:
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("watchclub").setLevel(level)
