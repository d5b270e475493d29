from __future__ import annotations
from typing import Set

from .alphabet import CHARSETS, Alphabet, CharsetSelection


class CharsetBuilder:
    """Builder do składania puli znaków z wybranych zestawów."""

    def __init__(self):
        self._chosen: Set[str] = set()

    def _with(self, name: str) -> "CharsetBuilder":
        self._chosen.add(name)
        return self

    def with_latin_lower(self) -> "CharsetBuilder":
        return self._with("latin_lower")

    def with_latin_upper(self) -> "CharsetBuilder":
        return self._with("latin_upper")

    def with_digits(self) -> "CharsetBuilder":
        return self._with("digits")

    def with_symbols(self) -> "CharsetBuilder":
        return self._with("symbols")

    def with_cyrillic_lower(self) -> "CharsetBuilder":
        return self._with("cyrillic_lower")

    def with_cyrillic_upper(self) -> "CharsetBuilder":
        return self._with("cyrillic_upper")

    def with_selection(self, selection: CharsetSelection) -> "CharsetBuilder":
        for name in selection.selected():
            self._with(name)
        return self

    def build(self) -> Alphabet:
        # kolejność zawsze według CHARSETS, niezależnie od kolejności wywołań
        charset = "".join(chars for name, chars in CHARSETS if name in self._chosen)
        return Alphabet(charset)


def build_alphabet(selection: CharsetSelection) -> Alphabet:
    """Skrót: pula znaków prosto z wyboru użytkownika."""
    return CharsetBuilder().with_selection(selection).build()
