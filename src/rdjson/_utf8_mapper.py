"""UTF-8 position mapping used to report byte offsets for parse errors."""

from __future__ import annotations

from typing import Final


class UTF8PositionMapper:
    """Maps code point offsets to UTF-8 byte offsets with a checkpoint system.

    Instead of encoding the whole document for every lookup, the mapper
    records the byte offset of every `checkpoint_interval`-th code point and
    walks forward from the nearest checkpoint.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """Initialize position mapper with checkpoint system.

        Args:
            text: The decoded document errors are reported against
            checkpoint_interval: Interval between checkpoints (default 256)
        """
        if checkpoint_interval <= 0:
            raise ValueError("checkpoint_interval must be positive")

        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        self.checkpoints: list[int] = []  # index * interval -> byte offset
        self._is_ascii_only: bool = text.isascii()

        if not self._is_ascii_only:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        """Build checkpoint list at regular code point intervals."""
        byte_pos = 0

        for char_pos, char in enumerate(self.text):
            if char_pos % self.checkpoint_interval == 0:
                self.checkpoints.append(byte_pos)
            byte_pos += _utf8_width(char)

    def char_to_byte(self, char_pos: int) -> int:
        """Convert a code point offset to a UTF-8 byte offset.

        Offsets past the end of the text are clamped to the text length.
        """
        char_pos = max(0, min(char_pos, len(self.text)))

        # Fast path for ASCII-only text
        if self._is_ascii_only:
            return char_pos

        index = min(
            char_pos // self.checkpoint_interval, len(self.checkpoints) - 1
        )
        byte_pos = self.checkpoints[index]
        for i in range(index * self.checkpoint_interval, char_pos):
            byte_pos += _utf8_width(self.text[i])

        return byte_pos


def _utf8_width(char: str) -> int:
    """Returns the encoded size of one code point, lone surrogates included."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4
