from __future__ import annotations
import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

DEFAULT_OUTPUT = "generated_passwords.txt"


@dataclass(frozen=True)
class Settings:
    output_path: str = DEFAULT_OUTPUT
    seed: Optional[int] = None


def _parse_seed(raw: Optional[str], source: str) -> Optional[int]:
    """Zły seed nie przerywa programu: komunikat na stderr i losowość systemowa."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"[ERROR] {source}: seed должен быть целым числом, получено {raw!r}", file=sys.stderr)
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generuje hasła o długościach od 10 000 do 1 000 000 znaków i mierzy czas."
    )
    parser.add_argument("--output", "-o", help="Plik wynikowy (nadpisywany)")
    parser.add_argument("--seed", "-s", help="Seed generatora liczb losowych")
    return parser


def load_settings(argv: Optional[Sequence[str]] = None, dotenv: bool = True) -> Settings:
    """
    Ustawienia z .env w bieżącym katalogu (PASSBENCH_OUTPUT, PASSBENCH_SEED),
    nadpisywane argumentami wiersza poleceń. Nic nie jest wymagane.
    """
    if dotenv:
        # tylko .env z bieżącego katalogu, bez szukania w katalogach nadrzędnych
        load_dotenv(Path.cwd() / ".env")

    args, unknown = build_parser().parse_known_args(argv)
    if unknown:
        print(f"[ERROR] Неизвестные аргументы пропущены: {' '.join(unknown)}", file=sys.stderr)

    output = args.output or os.getenv("PASSBENCH_OUTPUT") or DEFAULT_OUTPUT
    seed = _parse_seed(args.seed, "--seed")
    if seed is None:
        seed = _parse_seed(os.getenv("PASSBENCH_SEED"), "PASSBENCH_SEED")
    return Settings(output_path=output, seed=seed)
