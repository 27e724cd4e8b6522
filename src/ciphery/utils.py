import logging
from pathlib import Path
from typing import Optional

from .errors import InvalidArgumentError, SourceNotFoundError, SourceReadError
from .models import FilePath, InlineText, Source

DEFAULT_ENCODING = "utf-8"

logger = logging.getLogger(__name__)


def clean_path(raw: str) -> str:
    """Strip whitespace and the quotes a shell or file manager may leave around a pasted path."""
    return raw.strip().strip('"').strip("'")


def read_text_file(path: str, encoding: Optional[str] = None) -> str:
    """
    Read a whole file into memory and decode it.

    Decoding is strict: a file that is not valid in `encoding` is reported
    as unreadable instead of being patched up with replacement characters.
    """
    target = Path(path)
    enc = encoding or DEFAULT_ENCODING
    try:
        data = target.read_bytes()
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Failed to read file '{path}': no such file") from exc
    except OSError as exc:
        raise SourceReadError(f"Failed to read file '{path}': {exc.strerror or exc}") from exc
    try:
        return data.decode(enc)
    except LookupError as exc:
        raise InvalidArgumentError(f"Unknown encoding '{enc}'.") from exc
    except UnicodeDecodeError as exc:
        raise SourceReadError(f"Failed to read file '{path}': not valid {enc} text") from exc


def resolve_source(source: Source, encoding: Optional[str] = None) -> str:
    if isinstance(source, InlineText):
        logger.info("Input text: %s", source.text)
        return source.text
    if isinstance(source, FilePath):
        path = source.path
        logger.info("Reading text from file: %s", path)
        return read_text_file(path, encoding)
    raise InvalidArgumentError("No text or file path provided.")


def parse_key(raw: str) -> int:
    """Parse a shift amount; any integer is accepted, including negative values."""
    try:
        return int(raw.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidArgumentError(f"Key must be an integer, got '{raw}'.") from exc
