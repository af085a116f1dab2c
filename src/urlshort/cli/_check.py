"""``urlshort check`` — decode a file and print the effective table."""

import argparse
import sys

from urlshort.cli._load import load_redirections
from urlshort.errors import UrlshortError


def run_check(args: argparse.Namespace) -> None:
    """Print one ``path -> url`` line per effective redirection.

    Duplicate paths are collapsed the same way the server collapses
    them, so the output is exactly what would be served.
    """
    try:
        redirections = load_redirections(args.file, args.format)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    paths = redirections.map()
    for path in sorted(paths):
        print(f"{path} -> {paths[path]}")

    shadowed = len(redirections) - len(paths)
    summary = f"{len(paths)} redirection(s)"
    if shadowed:
        summary += f", {shadowed} overridden by later entries"
    print(summary, file=sys.stderr)
