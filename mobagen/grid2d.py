"""A fixed-size two-dimensional grid stored row by row."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar, Union

from mobagen.point2d import Point2D

T = TypeVar("T")

Key = Union[Point2D, "tuple[int, int]"]


class Grid2D(Generic[T]):
    """Cells addressed by ``(x, y)`` or a :class:`Point2D`."""

    def __init__(self, width: int = 0, height: int = 0, fill: Optional[T] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self.fill = fill
        self._width = width
        self._height = height
        self._data: list[Optional[T]] = [fill] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self._data)

    def _index(self, key: Key) -> int:
        if isinstance(key, Point2D):
            x, y = key.x, key.y
        else:
            x, y = key
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} grid")
        return x + y * self._width

    def __getitem__(self, key: Key) -> Optional[T]:
        return self._data[self._index(key)]

    def __setitem__(self, key: Key, value: T) -> None:
        self._data[self._index(key)] = value

    def resize(self, width: int, height: int) -> None:
        """Change the dimensions, keeping cells in storage order and padding with ``fill``."""
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        size = width * height
        self._data = self._data[:size] + [self.fill] * max(0, size - len(self._data))
        self._width = width
        self._height = height