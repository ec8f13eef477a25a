"""
Formatting utilities for displaying generated values.

Provides consistent, width-limited rendering of sampled values for the
command line.
"""

from typing import Any

DEFAULT_MAX_WIDTH = 72


def format_value(value: Any, max_width: int = DEFAULT_MAX_WIDTH) -> str:
    """Render a value with repr(), truncated to `max_width` characters."""
    rendered = repr(value)
    if max_width > 3 and len(rendered) > max_width:
        return rendered[: max_width - 3] + "..."
    return rendered


def format_grid(grid: tuple[tuple[Any, ...], ...]) -> str:
    """Render a 2D grid one row per line."""
    if not grid:
        return "(empty grid)"
    return "\n".join(" ".join(repr(cell) for cell in row) for row in grid)


def format_sample(values: list[Any], max_width: int = DEFAULT_MAX_WIDTH) -> list[str]:
    """Render sampled values as numbered lines."""
    digits = len(str(max(len(values) - 1, 0)))
    return [f"{index:>{digits}}: {format_value(value, max_width)}" for index, value in enumerate(values)]
