from __future__ import annotations
import sys
from typing import Callable, Optional, TextIO

from .alphabet import CharsetSelection
from .errors import InputClosed

YES = "да"
NO = "нет"

# (pole CharsetSelection, pytanie) w stałej kolejności
QUESTIONS = (
    ("latin_lower", "Использовать латиницу (строчные буквы)? (да/нет): "),
    ("latin_upper", "Использовать латиницу (заглавные буквы)? (да/нет): "),
    ("digits", "Использовать цифры? (да/нет): "),
    ("symbols", "Использовать спецсимволы? (да/нет): "),
    ("cyrillic_lower", "Использовать кириллицу (строчные буквы)? (да/нет): "),
    ("cyrillic_upper", "Использовать кириллицу (заглавные буквы)? (да/нет): "),
)

ReadLine = Callable[[str], str]


def ask_yes_no(prompt: str, read_line: ReadLine = input, out: Optional[TextIO] = None) -> bool:
    """
    Pyta aż do skutku: akceptuje tylko 'да' / 'нет' (bez względu na wielkość
    liter i białe znaki). Koniec wejścia -> InputClosed.
    """
    out = out or sys.stdout
    while True:
        try:
            answer = read_line(prompt).strip().lower()
        except EOFError as e:
            raise InputClosed("Wejście zamknięte przed udzieleniem odpowiedzi") from e
        if answer == YES:
            return True
        if answer == NO:
            return False
        print(f"Ошибка: введите '{YES}' или '{NO}'.", file=out)


def collect_selection(read_line: ReadLine = input, out: Optional[TextIO] = None) -> CharsetSelection:
    """Zadaje sześć pytań po kolei i składa z odpowiedzi CharsetSelection."""
    answers = {name: ask_yes_no(question, read_line, out) for name, question in QUESTIONS}
    return CharsetSelection(**answers)
