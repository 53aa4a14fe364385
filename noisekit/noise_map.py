"""Two-dimensional rasters of noise values and of colours."""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")

Color = tuple[int, int, int, int]

RASTER_MAX_WIDTH = 32_767
RASTER_MAX_HEIGHT = 32_767


class _Raster(Generic[T]):
    """Row-major grid that answers out-of-bounds reads with a border value."""

    _blank: ClassVar[object]
    _default_border: ClassVar[object]

    def __init__(self, width: int, height: int, border: T) -> None:
        self._width = 0
        self._height = 0
        self._cells: list[T] = []
        self.resize(width, height)
        self._border: T = self._normalise(border)

    def _normalise(self, value: object) -> T:
        raise NotImplementedError

    @property
    def size(self) -> tuple[int, int]:
        """Width and height of the raster."""
        return (self._width, self._height)

    def resize(self, width: int, height: int) -> None:
        """Change the size; a zero dimension empties the raster and resets the border.

        Existing cells are kept when the storage is already large enough.
        """
        width = operator.index(width)
        height = operator.index(height)
        if not 0 <= width < RASTER_MAX_WIDTH:
            raise ValueError(f"width must be in 0..{RASTER_MAX_WIDTH - 1}, got {width}")
        if not 0 <= height < RASTER_MAX_HEIGHT:
            raise ValueError(f"height must be in 0..{RASTER_MAX_HEIGHT - 1}, got {height}")
        if width == 0 or height == 0:
            self._width = self._height = 0
            self._cells = []
            self._border = self._default_border  # type: ignore[assignment]
            return
        cell_count = width * height
        if len(self._cells) < cell_count:
            self._cells = [self._blank] * cell_count  # type: ignore[list-item]
        self._width = width
        self._height = height

    def _offset(self, x: int, y: int) -> int | None:
        x = operator.index(x)
        y = operator.index(y)
        if 0 <= x < self._width and 0 <= y < self._height:
            return x + y * self._width
        return None

    def get_value(self, x: int, y: int) -> T:
        """Value at (x, y), or the border value outside the raster."""
        offset = self._offset(x, y)
        return self._border if offset is None else self._cells[offset]

    def set_value(self, x: int, y: int, value: T) -> None:
        """Store a value at (x, y); points outside the raster are ignored."""
        offset = self._offset(x, y)
        if offset is not None:
            self._cells[offset] = self._normalise(value)

    @staticmethod
    def _split_key(key: object) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("raster index must be an (x, y) pair")
        return key  # type: ignore[return-value]

    def __getitem__(self, key: tuple[int, int]) -> T:
        x, y = self._split_key(key)
        return self.get_value(x, y)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        x, y = self._split_key(key)
        offset = self._offset(x, y)
        if offset is None:
            raise IndexError(
                f"index ({x}, {y}) out of bounds for {type(self).__name__} "
                f"of size ({self._width}, {self._height})"
            )
        self._cells[offset] = self._normalise(value)

    def __iter__(self) -> Iterator[T]:
        """Yield the cells in row-major order."""
        return iter(self._cells[: self._width * self._height])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class NoiseMap(_Raster[float]):
    """Grid of noise values; reads outside it return ``border_value``."""

    _blank: ClassVar[object] = 0.0
    _default_border: ClassVar[object] = 0.0

    def __init__(self, width: int = 0, height: int = 0, border_value: float = 0.0) -> None:
        super().__init__(width, height, border_value)

    def _normalise(self, value: object) -> float:
        return float(value)  # type: ignore[arg-type]

    def resize(self, width: int, height: int) -> None:
        """Change the size; a zero dimension empties the map and resets the border."""
        super().resize(width, height)

    def get_value(self, x: int, y: int) -> float:
        """Value at (x, y), or ``border_value`` outside the map."""
        return super().get_value(x, y)

    def set_value(self, x: int, y: int, value: float) -> None:
        """Store a value at (x, y); points outside the map are ignored."""
        super().set_value(x, y, value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        return super().__getitem__(key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        super().__setitem__(key, value)

    def __iter__(self) -> Iterator[float]:
        """Yield the values in row-major order."""
        return super().__iter__()

    @property
    def border_value(self) -> float:
        return self._border

    @border_value.setter
    def border_value(self, value: float) -> None:
        self._border = self._normalise(value)


class NoiseImage(_Raster[Color]):
    """Grid of RGBA colours; reads outside it return ``border_color``."""

    _blank: ClassVar[object] = (0, 0, 0, 0)
    _default_border: ClassVar[object] = (0, 0, 0, 0)

    def __init__(
        self, width: int = 0, height: int = 0, border_color: Sequence[int] = (0, 0, 0, 0)
    ) -> None:
        super().__init__(width, height, border_color)  # type: ignore[arg-type]

    def _normalise(self, value: object) -> Color:
        channels = tuple(operator.index(c) for c in value)  # type: ignore[attr-defined]
        if len(channels) != 4:
            raise ValueError(f"a colour has 4 channels, got {len(channels)}")
        if not all(0 <= c <= 255 for c in channels):
            raise ValueError(f"colour channels must be in 0..255, got {channels}")
        return channels  # type: ignore[return-value]

    def resize(self, width: int, height: int) -> None:
        """Change the size; a zero dimension empties the image and resets the border."""
        super().resize(width, height)

    def get_value(self, x: int, y: int) -> Color:
        """Colour at (x, y), or ``border_color`` outside the image."""
        return super().get_value(x, y)

    def set_value(self, x: int, y: int, value: Sequence[int]) -> None:
        """Store a colour at (x, y); points outside the image are ignored."""
        super().set_value(x, y, value)  # type: ignore[arg-type]

    def __getitem__(self, key: tuple[int, int]) -> Color:
        return super().__getitem__(key)

    def __setitem__(self, key: tuple[int, int], value: Sequence[int]) -> None:
        super().__setitem__(key, value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Color]:
        """Yield the colours in row-major order."""
        return super().__iter__()

    @property
    def border_color(self) -> Color:
        return self._border

    @border_color.setter
    def border_color(self, color: Sequence[int]) -> None:
        self._border = self._normalise(color)