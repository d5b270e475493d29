from __future__ import annotations
from typing import Iterator, List

SEPARATOR = "-" * 50


def format_block(length: int, password: str) -> str:
    return (
        f"{SEPARATOR}\n"
        f"Password of length {length}:\n"
        f"{password}\n"
        f"{SEPARATOR}\n"
    )


class ReportBuffer:
    """Bufor raportu: bloki tylko dopisujemy, zapis do pliku raz na końcu."""

    def __init__(self):
        self._blocks: List[str] = []

    def append(self, length: int, password: str) -> None:
        self._blocks.append(format_block(length, password))

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def render(self) -> str:
        return "".join(self._blocks)
