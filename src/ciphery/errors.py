class CipherError(Exception):
    """Base class for every error ciphery reports to the user."""


class InvalidArgumentError(CipherError):
    """A required value is missing or malformed (e.g. a non-numeric key)."""


class ReadError(CipherError):
    """The text to transform could not be obtained."""


class SourceNotFoundError(ReadError):
    pass


class SourceReadError(ReadError):
    pass


class UnsupportedAlgorithmError(CipherError):
    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Algorithm '{algorithm}' is not implemented yet.")
        self.algorithm = algorithm


class WriteError(CipherError):
    """The result could not be written to the requested output file."""
