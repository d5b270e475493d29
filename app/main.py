#!/usr/bin/env python3
import random
import sys
from typing import Optional, Sequence

from passbench.config import load_settings
from passbench.driver import LENGTHS, PasswordBenchmark


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except SystemExit as e:
        if not e.code:
            # --help
            return 0
        print("[ERROR] Неверные аргументы, используются настройки по умолчанию", file=sys.stderr)
        settings = load_settings([])

    # jedno źródło losowości na cały przebieg
    rng = random.Random(settings.seed)

    print(f"[START] Длин паролей: {len(LENGTHS)}, файл результата: {settings.output_path}")
    bench = PasswordBenchmark(settings.output_path, rng)
    try:
        bench.run()
    except KeyboardInterrupt:
        print("\n[STOP]", file=sys.stderr)
    # kod wyjścia zawsze 0, błędy są już wypisane
    return 0


if __name__ == "__main__":
    sys.exit(main())
