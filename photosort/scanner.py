"""Header scanner module - locates the capture timestamp inside a TIFF/EXIF style header.

JPEG files carry an APP1 segment before the TIFF structure while CR2 files start
with it directly, so the timestamp sits at a different absolute offset in each.
The scanner walks the header left to right over a fixed sequence of markers
instead of seeking to a constant position.
"""

from pathlib import Path
from typing import Tuple
import logging

from photosort.errors import FileAccessError, FormatError

logger = logging.getLogger(__name__)

# Bytes read from the start of the file; enough for the marker walk on JPEG and CR2
HEADER_SIZE = 1024

# Second half of the repeated X/Y resolution block (72/1, 72/1)
REPEATED_PATTERN = b"\x00\x00\x00\x01\x00\x00\x00\x48"

# Bytes between the end of the repeated block and the date field
DATE_GAP = 7

# YYYY:MM:DD
DATE_LENGTH = 10

SKIP = "skip"
EXPECT = "expect"
ADVANCE = "advance"

# Ordered marker walk: (action, operand, marker name)
MARKER_SEQUENCE: Tuple[Tuple[str, object, str], ...] = (
    (SKIP, b"I", "byte-order marker 'I'"),
    (EXPECT, b"I", "byte-order marker 'II'"),
    (EXPECT, b"*", "TIFF magic '*'"),
    (SKIP, b"%", "separator '%'"),
    (SKIP, b"H", "repeated block 'H'"),
    (EXPECT, REPEATED_PATTERN, "repeated block pattern"),
    (ADVANCE, DATE_GAP, "gap before date field"),
)


class ScanCursor:
    """
    Forward-only position into an immutable header buffer.

    Every move either consumes exactly the bytes it asked for or raises
    FormatError; the position never goes backwards.
    """

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.position = 0

    def __repr__(self):
        return f"ScanCursor(position={self.position}, size={len(self.data)})"

    def skip_to(self, marker: bytes, name: str) -> int:
        """
        Consume bytes up to and including the next occurrence of ``marker``.

        Returns:
            Offset at which the marker was found
        """
        index = self.data.find(marker, self.position)
        if index < 0:
            raise FormatError(name, marker, b"", len(self.data))
        self.position = index + len(marker)
        return index

    def expect(self, expected: bytes, name: str) -> int:
        """Consume exactly ``expected`` at the current position."""
        offset = self.position
        observed = self.data[offset:offset + len(expected)]
        if observed != expected:
            raise FormatError(name, expected, observed, offset)
        self.position += len(expected)
        return offset

    def take(self, count: int, name: str) -> bytes:
        """Consume and return exactly ``count`` bytes."""
        offset = self.position
        chunk = self.data[offset:offset + count]
        if len(chunk) != count:
            raise FormatError(name, f"{count} bytes", chunk, offset)
        self.position += count
        return chunk

    def advance(self, count: int, name: str) -> int:
        offset = self.position
        self.take(count, name)
        return offset


def read_header(file_path: Path, size: int = HEADER_SIZE) -> bytes:
    """
    Read the fixed-size header prefix of a file.

    Files shorter than ``size`` return whatever they contain; the scan decides
    whether that is enough.

    Raises:
        FileAccessError: If the file cannot be opened or read
    """
    try:
        with open(file_path, 'rb') as f:
            header = f.read(size)
    except OSError as e:
        raise FileAccessError(f"Cannot read {file_path}: {e}", stage="reading header") from e

    logger.debug(f"Read {len(header)} header bytes from {file_path}")
    return header


def scan_header(header: bytes) -> bytes:
    """
    Locate the capture date inside a header and return its raw 10 bytes.

    Args:
        header: Bytes from the start of an image file

    Returns:
        The raw ``YYYY:MM:DD`` bytes

    Raises:
        FormatError: On the first marker that is missing or malformed
    """
    cursor = ScanCursor(header)

    for action, operand, name in MARKER_SEQUENCE:
        if action == SKIP:
            offset = cursor.skip_to(operand, name)
        elif action == EXPECT:
            offset = cursor.expect(operand, name)
        else:
            offset = cursor.advance(operand, name)
        logger.debug(f"Matched {name} at offset {offset}")

    date_field = cursor.take(DATE_LENGTH, "date field")
    logger.debug(f"Date field at offset {cursor.position - DATE_LENGTH}: {date_field!r}")
    return date_field
