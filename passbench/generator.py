from __future__ import annotations
import random
from typing import Iterable, Iterator, Tuple

from .alphabet import Alphabet


class RandomPasswordGenerator:
    """
    Losuje hasła z podanej puli znaków. Każda pozycja wybierana jest
    niezależnie i jednostajnie (ze zwracaniem). Źródło losowości przekazujemy
    z zewnątrz, więc ten sam seed daje te same hasła.

    Nie nadaje się do haseł kryptograficznych.
    """

    def __init__(self, alphabet: Alphabet, rng: random.Random):
        self.alphabet = alphabet
        self.rng = rng

    def generate(self, length: int) -> str:
        if length < 0:
            raise ValueError("Długość hasła nie może być ujemna")
        return "".join(self.rng.choices(self.alphabet.charset, k=length))

    def generate_many(self, lengths: Iterable[int]) -> Iterator[Tuple[int, str]]:
        """Leniwie zwraca pary (długość, hasło) w kolejności długości."""
        for length in lengths:
            yield length, self.generate(length)
