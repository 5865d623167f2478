from __future__ import annotations

from typing import Sequence


def format_size(size: Sequence[int]) -> str:
    """Render a shape the way error messages quote it, e.g. ``[2, 3]``."""
    return "[" + ", ".join(str(int(d)) for d in size) + "]"


def shape_message(reason: str, size: Sequence[int]) -> str:
    return f"{reason} (size: {format_size(size)})"


def det_tex(arg: str) -> str:
    """LaTeX for ``det`` applied to an already-rendered argument."""
    return "\\det\\left(" + arg + "\\right)"
