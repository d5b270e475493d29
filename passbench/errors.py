from __future__ import annotations


class PassBenchError(Exception):
    """Bazowy wyjątek generatora haseł."""


class InvalidConfiguration(PassBenchError, ValueError):
    """Nie wybrano żadnego zestawu znaków."""


class InputClosed(PassBenchError, EOFError):
    """Konsola zakończyła wejście przed udzieleniem odpowiedzi."""


class IOFailure(PassBenchError, OSError):
    """Nie udało się zapisać raportu do pliku."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
