"""Off-screen images holding packed pixels in a chosen byte order."""

from __future__ import annotations

_BITS_PER_PIXEL = (8, 16, 24, 32)


class Image:
    """A width x height block of packed pixels.

    Rows are padded to a multiple of 32 bits; ``size_line`` is the length
    of one row in bytes and ``data`` holds all rows in turn.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, big_endian: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp not in _BITS_PER_PIXEL:
            raise ValueError(f"unsupported bits per pixel: {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.big_endian = big_endian
        self.size_line = (width * bpp + 31) // 32 * 4
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def _encode(self, color: int) -> bytes:
        opp = self.bytes_per_pixel
        return (color & ((1 << (8 * opp)) - 1)).to_bytes(opp, self.byteorder)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color``, cut to the pixel width, at (x, y)."""
        start = self._offset(x, y)
        self.data[start:start + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self.byteorder)

    def row(self, y: int) -> bytes:
        """Return the pixel bytes of row ``y``, without padding."""
        start = self._offset(0, y)
        return bytes(self.data[start:start + self.width * self.bytes_per_pixel])

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        span = self._encode(color) * self.width
        for y in range(self.height):
            start = y * self.size_line
            self.data[start:start + len(span)] = span

    def blit(self, other: Image, x: int, y: int) -> None:
        """Copy ``other`` so that its top-left corner lands at (x, y), clipped."""
        left = max(0, x)
        top = max(0, y)
        right = min(self.width, x + other.width)
        bottom = min(self.height, y + other.height)
        if left >= right or top >= bottom:
            return
        same_format = other.bpp == self.bpp and other.big_endian == self.big_endian
        opp = self.bytes_per_pixel
        for dst_y in range(top, bottom):
            src_y = dst_y - y
            if same_format:
                src = other._offset(left - x, src_y)
                dst = self._offset(left, dst_y)
                count = (right - left) * opp
                self.data[dst:dst + count] = other.data[src:src + count]
            else:
                for dst_x in range(left, right):
                    self.set_pixel(dst_x, dst_y, other.get_pixel(dst_x - x, src_y))