"""Software back buffer and the game's per-frame rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

BYTES_PER_PIXEL = 4


@dataclass
class OffscreenBuffer:
    """A 32-bit-per-pixel pixel buffer laid out row by row, little-endian."""

    width: int
    height: int
    pitch: int = field(init=False)
    memory: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.resize(self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer for new dimensions; the contents are cleared."""
        if width < 0 or height < 0:
            raise ValueError(f"buffer dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pitch = width * BYTES_PER_PIXEL
        self.memory = bytearray(width * height * BYTES_PER_PIXEL)

    def pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        offset = y * self.pitch + x * BYTES_PER_PIXEL
        return int.from_bytes(self.memory[offset:offset + BYTES_PER_PIXEL], "little")


def game_update_and_render(buffer: OffscreenBuffer, blue_offset: int, green_offset: int) -> None:
    """Advance the game by one frame and draw it into the buffer."""
    render_weird_gradient(buffer, blue_offset, green_offset)


def render_weird_gradient(buffer: OffscreenBuffer, blue_offset: int, green_offset: int) -> None:
    """Fill the buffer with a blue/green gradient shifted by the given offsets.

    Each pixel becomes ``(green << 8) | blue`` where blue is the column plus
    ``blue_offset`` and green is the row plus ``green_offset``, both modulo 256.
    """
    width = buffer.width
    row_bytes = width * BYTES_PER_PIXEL
    blue = bytes((x + blue_offset) & 0xFF for x in range(width))
    zeros = bytes(width)
    memory = buffer.memory
    for y in range(buffer.height):
        start = y * buffer.pitch
        end = start + row_bytes
        green = bytes([(y + green_offset) & 0xFF]) * width
        memory[start:end:BYTES_PER_PIXEL] = blue
        memory[start + 1:end:BYTES_PER_PIXEL] = green
        memory[start + 2:end:BYTES_PER_PIXEL] = zeros
        memory[start + 3:end:BYTES_PER_PIXEL] = zeros