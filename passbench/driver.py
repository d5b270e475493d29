from __future__ import annotations
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, TextIO, Tuple

from .alphabet import Alphabet
from .builder import build_alphabet
from .errors import InputClosed, InvalidConfiguration, IOFailure, PassBenchError
from .generator import RandomPasswordGenerator
from .prompt import ReadLine, collect_selection
from .report import ReportBuffer
from .timer import PerformanceTimer
from .writer import write_text

LENGTHS: Tuple[int, ...] = (
    10_000, 20_000, 30_000, 40_000, 50_000, 60_000, 70_000, 80_000, 90_000, 100_000,
    150_000, 200_000, 300_000, 400_000, 500_000, 600_000, 700_000, 800_000, 900_000, 1_000_000,
)


class DriverState(Enum):
    COLLECTING_CONFIG = "collecting_config"
    BUILDING_POOL = "building_pool"
    GENERATING = "generating"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunResult:
    state: DriverState
    timings: List[Tuple[int, float]] = field(default_factory=list)
    error: Optional[PassBenchError] = None

    @property
    def ok(self) -> bool:
        return self.state is DriverState.DONE


class PasswordBenchmark:
    """
    Jeden przebieg programu:
      pytania -> pula znaków -> generowanie + pomiar dla każdej długości -> zapis.

    Błędy konfiguracji, zamknięte wejście i błąd zapisu są wypisywane na stderr
    i kończą przebieg w stanie FAILED (bez wyjątku dla wywołującego).
    """

    def __init__(
        self,
        output_path: str,
        rng: random.Random,
        read_line: Optional[ReadLine] = None,
        lengths: Sequence[int] = LENGTHS,
        timer: Optional[PerformanceTimer] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.output_path = output_path
        self.rng = rng
        self.read_line = read_line or input
        self.lengths = tuple(lengths)
        self.timer = timer or PerformanceTimer()
        self._out = out
        self._err = err
        self.state = DriverState.COLLECTING_CONFIG

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def _fail(self, result: RunResult, error: PassBenchError, message: str) -> RunResult:
        self.state = DriverState.FAILED
        result.state = self.state
        result.error = error
        print(message, file=self.err)
        return result

    def run(self) -> RunResult:
        self.state = DriverState.COLLECTING_CONFIG
        result = RunResult(state=self.state)

        # === KONFIGURACJA ===
        try:
            selection = collect_selection(self.read_line, self.out)
        except InputClosed as e:
            return self._fail(result, e, "\n[STOP] Ввод закрыт, пароли не сгенерированы.")

        # === PULA ZNAKÓW ===
        self.state = DriverState.BUILDING_POOL
        try:
            alphabet = build_alphabet(selection)
        except InvalidConfiguration as e:
            return self._fail(result, e, "[ERROR] Ошибка: должен быть выбран хотя бы один набор символов")

        # === GENEROWANIE ===
        self.state = DriverState.GENERATING
        report = self._generate(alphabet, result)

        # === ZAPIS ===
        self.state = DriverState.WRITING
        try:
            write_text(self.output_path, report.render())
        except IOFailure as e:
            return self._fail(result, e, f"[ERROR] Ошибка записи в файл: {e}")

        print(f"[SAVE] {len(report)} паролей записано в {self.output_path}", file=self.out)
        self.state = DriverState.DONE
        result.state = self.state
        return result

    def _generate(self, alphabet: Alphabet, result: RunResult) -> ReportBuffer:
        generator = RandomPasswordGenerator(alphabet, self.rng)
        report = ReportBuffer()
        for length in self.lengths:
            # mierzymy generowanie razem z dopisaniem bloku do bufora
            elapsed = self.timer.measure(lambda: report.append(length, generator.generate(length)))
            result.timings.append((length, elapsed))
            print(f"[GEN] Сгенерирован пароль длиной {length} за {elapsed:.2f} мс", file=self.out)
        return report
