from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Iterator, List, Tuple

from .errors import InvalidConfiguration

LATIN_LOWER = "abcdefghijklmnopqrstuvwxyz"
LATIN_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:',.<>?"
CYRILLIC_LOWER = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
CYRILLIC_UPPER = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"


@dataclass(frozen=True)
class CharsetSelection:
    """Które zestawy znaków mają trafić do puli (kolejność pól = kolejność w puli)."""

    latin_lower: bool = False
    latin_upper: bool = False
    digits: bool = False
    symbols: bool = False
    cyrillic_lower: bool = False
    cyrillic_upper: bool = False

    @classmethod
    def all(cls) -> "CharsetSelection":
        return cls(*(True for _ in fields(cls)))

    @classmethod
    def none(cls) -> "CharsetSelection":
        return cls()

    def any_selected(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def selected(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


# nazwa pola -> zestaw znaków, w stałej kolejności
CHARSETS: Tuple[Tuple[str, str], ...] = (
    ("latin_lower", LATIN_LOWER),
    ("latin_upper", LATIN_UPPER),
    ("digits", DIGITS),
    ("symbols", SYMBOLS),
    ("cyrillic_lower", CYRILLIC_LOWER),
    ("cyrillic_upper", CYRILLIC_UPPER),
)


class Alphabet:
    """Niezmienna pula znaków, z której losowane są hasła."""

    __slots__ = ("_charset", "_base")

    def __init__(self, charset: str):
        if not charset:
            raise InvalidConfiguration("Musi być wybrany co najmniej jeden zestaw znaków")
        self._charset = charset
        self._base = len(charset)

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def base(self) -> int:
        return self._base

    def __len__(self) -> int:
        return self._base

    def __iter__(self) -> Iterator[str]:
        return iter(self._charset)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self._charset

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Alphabet):
            return self._charset == other._charset
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._charset)

    def __repr__(self) -> str:
        return f"Alphabet('{self._charset[:10]}{'...' if self._base > 10 else ''}', base={self._base})"
