from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operation(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class Algorithm(str, Enum):
    """
    Algorithms selectable from the command line and the interactive menu.

    Only Caesar is implemented; the others are reserved names so the CLI
    surface stays stable when they land.
    """

    CAESAR = "caesar"
    ROT13 = "rot13"
    BASE64 = "base64"

    @property
    def implemented(self) -> bool:
        return self is Algorithm.CAESAR

    @property
    def needs_key(self) -> bool:
        return self is Algorithm.CAESAR

    @property
    def label(self) -> str:
        if self is Algorithm.CAESAR:
            return "Caesar"
        if self is Algorithm.ROT13:
            return "ROT13 (coming soon)"
        return "Base64 (coming soon)"


@dataclass(frozen=True)
class InlineText:
    text: str


@dataclass(frozen=True)
class FilePath:
    path: str


Source = Union[InlineText, FilePath]


@dataclass(frozen=True)
class CipherRequest:
    operation: Operation
    algorithm: Algorithm
    key: Optional[int]
    source: Source

    def describe(self) -> str:
        if isinstance(self.source, FilePath):
            origin = f"file {self.source.path}"
        else:
            origin = "inline text"
        return f"{self.operation.value} {self.algorithm.value} key={self.key} from {origin}"
