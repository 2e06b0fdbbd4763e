"""Append-only G-code program with explicit positioning mode tracking."""
from contextlib import contextmanager
from typing import Iterator, List

from .errors import PositioningModeError
from .utils.gcode_format import ABSOLUTE_POSITIONING, RELATIVE_POSITIONING


class ToolpathProgram:
    """
    Ordered sequence of G-code command lines.

    Lines are only ever appended; the emission order is the execution order
    on the machine. The program also tracks whether relative positioning is
    currently active so generators cannot leak it to their caller.
    """

    def __init__(self):
        self._lines: List[str] = []
        self._relative = False

    def emit(self, line: str) -> None:
        """Append one command line."""
        self._lines.append(line)

    def extend(self, lines) -> None:
        """Append several command lines in order."""
        for line in lines:
            self.emit(line)

    @property
    def is_relative(self) -> bool:
        return self._relative

    @contextmanager
    def relative(self) -> Iterator["ToolpathProgram"]:
        """
        Scope relative positioning.

        Emits G91 on entry and G90 on every exit path, including when the body
        raises. Scopes do not nest.

        Raises:
            PositioningModeError: If relative positioning is already active
        """
        if self._relative:
            raise PositioningModeError("Relative positioning is already active")

        self.emit(RELATIVE_POSITIONING)
        self._relative = True
        try:
            yield self
        finally:
            self.emit(ABSOLUTE_POSITIONING)
            self._relative = False

    @property
    def lines(self) -> List[str]:
        """Copy of the command lines."""
        return list(self._lines)

    def to_text(self) -> str:
        """Program text, one command per line."""
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ToolpathProgram):
            return self._lines == other._lines
        if isinstance(other, list):
            return self._lines == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ToolpathProgram({len(self._lines)} lines)"
