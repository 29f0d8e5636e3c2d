"""Shared fixtures for the photosort tests."""

from pathlib import Path

import pytest

# APP1 segment start of a camera JPEG, up to the TIFF structure
JPEG_PREFIX = b"\xff\xd8\xff\xe1\x1c\x52Exif\x00\x00"

# TIFF structure shared by JPEG and CR2: byte order, magic, IFD offset,
# an entry holding 0x25, then the 72/1 X and Y resolution rationals
TIFF_BLOCK = (
    b"II*\x00"
    b"\x10\x00\x00\x00"
    b"\x25\x00\x00\x00"
    b"\x00\x00\x00\x00"
    b"\x48\x00\x00\x00\x01\x00\x00\x00"
    b"\x48\x00\x00\x00\x01\x00\x00\x00"
)

CAPTURE_TIME = b"2020:02:01 14:32:14\x00"


def build_header(prefix: bytes = b"", tiff: bytes = TIFF_BLOCK,
                 timestamp: bytes = CAPTURE_TIME, size: int = 1024) -> bytes:
    """Assemble an image header padded with zeros to ``size`` bytes."""
    header = prefix + tiff + timestamp
    return header + b"\x00" * max(0, size - len(header))


@pytest.fixture
def make_header():
    return build_header


@pytest.fixture
def photo_file(tmp_path):
    """A JPEG-like photo whose header carries 2020:02:01."""
    source_dir = tmp_path / "incoming"
    source_dir.mkdir()
    path = source_dir / "IMG_0001.JPG"
    path.write_bytes(build_header(prefix=JPEG_PREFIX) + b"\xff\xd9")
    return path


@pytest.fixture
def home_dir(tmp_path, monkeypatch) -> Path:
    """Point HOME at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return home
