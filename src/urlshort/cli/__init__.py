"""urlshort CLI — serve or check a redirection file.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="YAML or JSON redirection file")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default=None,
        help="Document format (default: inferred from the file extension)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — permanent redirects from a YAML or JSON path table.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve redirects over HTTP")
    _add_source_args(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--fallback-text",
        default=None,
        help="Answer unmatched paths with this text instead of 404",
    )
    serve_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error"),
        help="Logging level",
    )
    serve_parser.add_argument("--debug", action="store_true", help="Verbose error bodies")

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a file and print its table")
    _add_source_args(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from urlshort.cli._serve import run_server

        run_server(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
