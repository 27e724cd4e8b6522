__version__ = "0.1.0"

from .classical import caesar_decrypt, caesar_encrypt, caesar_shift, transform
from .engine import run_request
from .errors import (
    CipherError,
    InvalidArgumentError,
    ReadError,
    SourceNotFoundError,
    SourceReadError,
    UnsupportedAlgorithmError,
    WriteError,
)
from .models import Algorithm, CipherRequest, FilePath, InlineText, Operation
from .utils import parse_key, read_text_file, resolve_source

__all__ = [
    "__version__",
    "Algorithm",
    "CipherError",
    "CipherRequest",
    "FilePath",
    "InlineText",
    "InvalidArgumentError",
    "Operation",
    "ReadError",
    "SourceNotFoundError",
    "SourceReadError",
    "UnsupportedAlgorithmError",
    "WriteError",
    "caesar_decrypt",
    "caesar_encrypt",
    "caesar_shift",
    "parse_key",
    "read_text_file",
    "resolve_source",
    "run_request",
    "transform",
]
