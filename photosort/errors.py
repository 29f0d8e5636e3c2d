"""Error types raised by the photo sorting pipeline."""

from typing import Optional, Union


class PhotoSortError(Exception):
    """Base error for the project. ``stage`` names the pipeline step that failed."""

    stage = "sorting photo"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class FileAccessError(PhotoSortError):
    """Opening, reading or creating something on disk failed."""

    stage = "reading header"


class FormatError(PhotoSortError):
    """An expected header marker was not found where the scan required it."""

    stage = "scanning header"

    def __init__(self, marker: str, expected: Union[bytes, str], observed: bytes, offset: int):
        self.marker = marker
        self.expected = expected
        self.observed = observed
        self.offset = offset
        wanted = expected if isinstance(expected, str) else repr(expected)
        found = repr(observed) if observed else "end of header"
        super().__init__(f"{marker}: expected {wanted}, found {found} at offset {offset}")


class EncodingError(PhotoSortError):
    stage = "decoding date"


class DateFormatError(PhotoSortError):
    """Decoded date text is not of the form YYYY:MM:DD."""

    stage = "parsing date"

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(f"{message}: {text!r}")


class RelocationError(PhotoSortError):
    stage = "relocating file"


class ConfigError(PhotoSortError):
    stage = "reading configuration"
