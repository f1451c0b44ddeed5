"""
Line buffer for generated source text.

Stores generated lines together with their indentation depth and renders
them into the final text of one emission unit.
"""

from typing import List, Tuple

DEFAULT_INDENT_UNIT = "  "


class LineBuffer:
    """Append-only sequence of ``(text, depth)`` lines."""

    def __init__(self):
        self._lines: List[Tuple[str, int]] = []

    def append(self, text: str, depth: int = 0):
        """
        Append text as one or more lines at the given depth.

        Text containing line breaks is split and every piece is tagged with
        the same depth.

        Args:
            text: Line content, without indentation
            depth: Indentation depth, must not be negative
        """
        if depth < 0:
            raise ValueError(f"Indentation depth must be >= 0, got {depth}")

        for line in str(text).split("\n"):
            self._lines.append((line, depth))

    def render(self, indent_unit: str = DEFAULT_INDENT_UNIT) -> str:
        """
        Render all lines into a single string.

        Args:
            indent_unit: Whitespace emitted once per depth level

        Returns:
            The joined text; blank lines carry no indentation
        """
        rendered = []
        for text, depth in self._lines:
            if text.strip():
                rendered.append(f"{indent_unit * depth}{text}")
            else:
                rendered.append("")
        return "\n".join(rendered)

    def clear(self):
        """Drop every stored line."""
        self._lines.clear()

    @property
    def lines(self) -> Tuple[Tuple[str, int], ...]:
        """Read-only view of the stored lines."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
