import logging
from typing import Optional

from .classical import transform
from .errors import InvalidArgumentError, UnsupportedAlgorithmError
from .models import Algorithm, CipherRequest
from .utils import resolve_source

logger = logging.getLogger(__name__)


def run_request(request: CipherRequest, encoding: Optional[str] = None) -> str:
    """
    Execute a single request and return the transformed text.

    The algorithm and key are checked before the source is read, so a bad
    request never touches the filesystem.
    """
    logger.info("%s mode, algorithm: %s", request.operation.value.capitalize(), request.algorithm.value)
    if not request.algorithm.implemented:
        raise UnsupportedAlgorithmError(request.algorithm.value)
    if request.algorithm.needs_key and request.key is None:
        raise InvalidArgumentError(f"No key provided for {request.algorithm.label} cipher.")

    text = resolve_source(request.source, encoding)
    logger.info("Key used: %s", request.key)

    if request.algorithm is Algorithm.CAESAR:
        return transform(text, request.key, request.operation)
    raise UnsupportedAlgorithmError(request.algorithm.value)
