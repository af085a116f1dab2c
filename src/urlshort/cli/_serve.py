"""``urlshort serve`` — load a redirection file and serve it."""

import argparse
import logging
import sys

from urlshort.app import App
from urlshort.cli._load import load_redirections
from urlshort.config import AppConfig
from urlshort.dispatch import map_handler
from urlshort.errors import UrlshortError
from urlshort.fallbacks import not_found, text_fallback

logger = logging.getLogger("urlshort.cli")


def build_config(args: argparse.Namespace) -> AppConfig:
    """Overlay CLI flags on the AppConfig defaults."""
    defaults = AppConfig()
    return AppConfig(
        host=args.host or defaults.host,
        port=args.port or defaults.port,
        debug=args.debug,
        log_level=args.log_level or defaults.log_level,
        fallback_body=args.fallback_text,
    )


def build_app(args: argparse.Namespace) -> App:
    """Decode the redirection file and wrap it in an App.

    Raises:
        UrlshortError: The file could not be read or decoded.
    """
    config = build_config(args)
    redirections = load_redirections(args.file, args.format)
    fallback = text_fallback(config.fallback_body) if config.fallback_body is not None else not_found
    handler = map_handler(redirections.map(), fallback)
    logger.info("loaded %d redirection(s) from %s", len(handler.paths), args.file)
    return App(handler, config)


def run_server(args: argparse.Namespace) -> None:
    """Configure logging, build the app, and serve until interrupted."""
    level = (args.log_level or AppConfig().log_level).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        app = build_app(args)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("serving on http://%s:%d", app.config.host, app.config.port)
    app.run()
