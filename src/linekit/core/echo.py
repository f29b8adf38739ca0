# src/linekit/core/echo.py
from typing import Sequence

def render_echo(tokens: Sequence[str], omit_newline: bool = False) -> str:
    """Joins tokens with single spaces, ending with a newline unless omitted."""
    return " ".join(tokens) + ("" if omit_newline else "\n")
