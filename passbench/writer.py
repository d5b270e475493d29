from __future__ import annotations
from pathlib import Path
from typing import Union

from .errors import IOFailure


def write_text(path: Union[str, Path], payload: str) -> None:
    """Nadpisuje plik (truncate + write) treścią raportu, w UTF-8."""
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(payload)
    except OSError as e:
        raise IOFailure(str(path), e.strerror or str(e)) from e
