"""Plain-text rendering of quote listings."""

from __future__ import annotations

import shutil
import textwrap
from typing import Sequence

from qquotes.store import Quote

EMPTY_MESSAGE = "There is no quote saved."
_MIN_TEXT_WIDTH = 20


def terminal_width() -> int:
    return shutil.get_terminal_size((80, 24)).columns


def render_quotes(quotes: Sequence[Quote], *, long_format: bool = False, width: int | None = None) -> list[str]:
    """Render one block per quote: ``#<id>`` followed by the wrapped text."""

    if not quotes:
        return [EMPTY_MESSAGE]

    width = width or terminal_width()
    id_width = max(len(f"#{quote.id}") for quote in quotes)
    indent = " " * (id_width + 2)
    text_width = max(width - len(indent), _MIN_TEXT_WIDTH)

    lines: list[str] = []
    for quote in quotes:
        label = f"#{quote.id}".ljust(id_width)
        wrapped = textwrap.wrap(quote.text, width=text_width) or [""]
        lines.append(f"{label}  {wrapped[0]}")
        lines.extend(f"{indent}{chunk}" for chunk in wrapped[1:])
        if long_format:
            details = []
            if quote.author:
                details.append(f"by {quote.author}")
            if quote.created_at is not None:
                details.append(f"saved {quote.created_at:%Y-%m-%d %H:%M:%S}")
            if details:
                lines.append(f"{indent}({', '.join(details)})")
        elif quote.author:
            lines.append(f"{indent}-- {quote.author}")
    return lines


__all__ = ["EMPTY_MESSAGE", "render_quotes", "terminal_width"]
