"""A fixed-size two-dimensional array addressed by column and row."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class RectangleArray:
    """A ``width`` by ``height`` grid indexed as ``grid[x, y]``; ``grid[x]`` is column x."""

    def __init__(self, width: int = 1, height: int = 1, fill: Any = None) -> None:
        self._fill = fill
        self._allocate(width, height)

    def _allocate(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self._width = width
        self._height = height
        self._columns = [[self._fill] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check(self, x: int, y: int | None = None) -> None:
        if not 0 <= x < self._width:
            raise IndexError(f"column {x} out of range 0..{self._width - 1}")
        if y is not None and not 0 <= y < self._height:
            raise IndexError(f"row {y} out of range 0..{self._height - 1}")

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            x, y = key
            self._check(x, y)
            return self._columns[x][y]
        self._check(key)
        return self._columns[key]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        x, y = key
        self._check(x, y)
        self._columns[x][y] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RectangleArray):
            return NotImplemented
        return self._columns == other._columns and (
            self._width,
            self._height,
        ) == (other._width, other._height)

    def resize(self, width: int, height: int) -> None:
        """Change the size; the contents are reset unless the size is unchanged."""
        if (width, height) == (self._width, self._height):
            return
        self._allocate(width, height)

    def set_to(self, value: Any) -> None:
        """Set every cell to ``value``."""
        for column in self._columns:
            column[:] = [value] * self._height

    def set_border_to(self, value: Any) -> None:
        """Set the outermost rows and columns to ``value``."""
        if self._width == 0 or self._height == 0:
            return
        for column in self._columns:
            column[0] = value
            column[-1] = value
        self._columns[0][:] = [value] * self._height
        self._columns[-1][:] = [value] * self._height

    def render(self) -> str:
        """One line per row, one character per cell; integers are character codes."""
        def char(value: Any) -> str:
            if isinstance(value, int) and not isinstance(value, bool):
                return chr(value)
            return str(value)

        return "".join(
            "".join(char(self._columns[x][y]) for x in range(self._width)) + "\n"
            for y in range(self._height)
        )

    def save_to_file(self, path: str | Path) -> None:
        """Write :meth:`render` to a text file."""
        with open(path, "w", encoding="utf-8") as stream:
            stream.write(self.render())