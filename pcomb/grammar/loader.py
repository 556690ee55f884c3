"""Grammar file loading"""

from __future__ import annotations
from pathlib    import Path


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def load_grammar_text(path: str) -> str:
    """
    Read a grammar file as UTF-8 with newlines normalized to '\\n'.
    """
    return normalize_newlines(Path(path).read_text(encoding="utf-8"))
