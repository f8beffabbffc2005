from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 1 or self.column < 1:
            msg = f"Position must be 1-based, got row={self.row}, column={self.column}"
            raise ValueError(msg)

    @classmethod
    def at_line_end(cls, row: int, line: str) -> Self:
        # columns count characters; an empty line still ends at column 1
        return cls(row, max(len(line), 1))

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


@dataclass(frozen=True, slots=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def line(cls, row: int, line: str) -> Self:
        return cls(Position(row, 1), Position.at_line_end(row, line))

    def __str__(self) -> str:
        return f"({self.start}, {self.end})"
