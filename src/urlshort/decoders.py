"""Configuration decoders: YAML and JSON documents to redirect handlers.

Both formats encode the same document, a sequence of objects with two
string fields (any other keys are ignored)::

    - path: /some-path
      url: https://www.some-url.com/demo

``yaml_handler`` and ``json_handler`` parse the bytes, check the shape,
and build a ``RedirectHandler`` around the given fallback. The only
error they raise is ``DecodeError``, chained from the parser's or the
schema check's own exception.

Empty (or whitespace-only) input and a top-level ``null`` decode to an
empty table in both formats; the resulting handler forwards every
request to the fallback.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import yaml

from urlshort.dispatch import Handler, RedirectHandler, map_handler
from urlshort.errors import ConfigurationError, DecodeError, SchemaError
from urlshort.redirections import Redirection, Redirections

logger = logging.getLogger("urlshort.decoders")

_FIELDS = ("path", "url")


def _to_redirections(document: Any) -> Redirections:
    """Check a parsed document against the schema and build the table.

    Keys other than ``path`` and ``url`` are ignored, so documents shared
    with other tools (carrying ``status`` or ``note`` fields) still load.
    """
    if document is None:
        return Redirections()
    if not isinstance(document, list):
        msg = f"expected a list of redirections, got {type(document).__name__}"
        raise SchemaError(msg)

    entries: list[Redirection] = []
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            msg = f"item {index}: expected an object, got {type(item).__name__}"
            raise SchemaError(msg, index=index)
        for name in _FIELDS:
            if name not in item:
                msg = f"item {index}: missing field {name!r}"
                raise SchemaError(msg, index=index, field=name)
            if not isinstance(item[name], str):
                msg = f"item {index}: field {name!r} must be a string, got {type(item[name]).__name__}"
                raise SchemaError(msg, index=index, field=name)
        entries.append(Redirection(path=item["path"], url=item["url"]))
    return Redirections.of(entries)


def _is_blank(raw: bytes | str) -> bool:
    return not raw.strip()


def decode_yaml(raw: bytes | str) -> Redirections:
    """Parse a YAML document into a redirection table.

    Raises:
        DecodeError: Invalid YAML, or a document of the wrong shape.
    """
    if _is_blank(raw):
        return Redirections()
    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise DecodeError("yaml", str(exc)) from exc
    try:
        return _to_redirections(document)
    except SchemaError as exc:
        raise DecodeError("yaml", str(exc)) from exc


def decode_json(raw: bytes | str) -> Redirections:
    """Parse a JSON document into a redirection table.

    Raises:
        DecodeError: Invalid JSON (or undecodable bytes), or a document
            of the wrong shape.
    """
    if _is_blank(raw):
        return Redirections()
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError("json", str(exc)) from exc
    try:
        return _to_redirections(document)
    except SchemaError as exc:
        raise DecodeError("json", str(exc)) from exc


_DECODERS: dict[str, Callable[[bytes | str], Redirections]] = {
    "yaml": decode_yaml,
    "yml": decode_yaml,
    "json": decode_json,
}


def decode(raw: bytes | str, format: str) -> Redirections:  # noqa: A002
    """Decode *raw* with the decoder registered for *format*.

    Raises:
        ConfigurationError: *format* is not ``yaml``, ``yml``, or ``json``.
        DecodeError: The document itself is invalid.
    """
    decoder = _DECODERS.get(format.lower())
    if decoder is None:
        known = ", ".join(sorted(_DECODERS))
        msg = f"Unknown redirection format {format!r}. Expected one of: {known}"
        raise ConfigurationError(msg)
    return decoder(raw)


def _build(redirections: Redirections, fallback: Handler, format: str) -> RedirectHandler:  # noqa: A002
    paths = redirections.map()
    logger.debug(
        "decoded %d %s redirection(s) covering %d path(s)",
        len(redirections),
        format,
        len(paths),
    )
    return map_handler(paths, fallback)


def yaml_handler(raw: bytes | str, fallback: Handler) -> RedirectHandler:
    """Parse YAML redirections and return a handler over *fallback*.

    See ``map_handler`` for the dispatch rules.

    Raises:
        DecodeError: The YAML is invalid or not a list of
            ``{path, url}`` objects. No handler is built.
    """
    return _build(decode_yaml(raw), fallback, "yaml")


def json_handler(raw: bytes | str, fallback: Handler) -> RedirectHandler:
    """Parse JSON redirections and return a handler over *fallback*.

    Raises:
        DecodeError: The JSON is invalid or not a list of
            ``{path, url}`` objects. No handler is built.
    """
    return _build(decode_json(raw), fallback, "json")
