"""Redirection file loading shared by ``urlshort serve`` and ``urlshort check``."""

from pathlib import Path

from urlshort.decoders import decode
from urlshort.errors import ConfigurationError
from urlshort.redirections import Redirections

_EXTENSIONS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def infer_format(path: Path) -> str:
    """Map a file extension to a decoder format name.

    Raises:
        ConfigurationError: The extension is not one we know.
    """
    fmt = _EXTENSIONS.get(path.suffix.lower())
    if fmt is None:
        msg = f"Cannot infer format from {path.name!r}; pass --format yaml or --format json"
        raise ConfigurationError(msg)
    return fmt


def load_redirections(file: str, format: str | None = None) -> Redirections:  # noqa: A002
    """Read *file* and decode it.

    Raises:
        ConfigurationError: The file is unreadable or its format unknown.
        DecodeError: The file content is not a valid redirection document.
    """
    path = Path(file)
    fmt = format or infer_format(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read {file}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    return decode(raw, fmt)
