"""Photo analyzer module - turns the raw header date field into a calendar date."""

from dataclasses import dataclass
from pathlib import Path
import logging

from photosort.errors import DateFormatError, EncodingError
from photosort.scanner import read_header, scan_header

logger = logging.getLogger(__name__)

# Components that would step outside of the archive root when used as folders
UNSAFE_COMPONENTS = {'.', '..'}


@dataclass(frozen=True)
class CalendarDate:
    """Capture date components, kept as the text found in the header."""

    year: str
    month: str
    day: str

    def __str__(self):
        return f"{self.year}:{self.month}:{self.day}"


def decode_date_field(raw: bytes) -> str:
    """
    Decode raw date bytes as text.

    Raises:
        EncodingError: If the bytes are not valid UTF-8
    """
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f"Date field is not valid text: {raw!r} ({e.reason})") from e


def parse_date(raw: bytes) -> CalendarDate:
    """
    Parse an EXIF style date into its components.

    EXIF dates are written as "YYYY:MM:DD HH:MM:SS"; anything after the first
    whitespace is ignored.

    Args:
        raw: Date bytes extracted from the header

    Returns:
        CalendarDate with year, month and day as text

    Raises:
        EncodingError: If the bytes do not decode
        DateFormatError: If the date does not have exactly three usable components
    """
    text = decode_date_field(raw)
    logger.debug(f"Decoded date text: {text!r}")

    tokens = text.split()
    date = tokens[0] if tokens else ""
    components = date.split(':')

    if len(components) != 3:
        raise DateFormatError("Read something that is not a date", text)

    for component in components:
        if not component:
            raise DateFormatError("Date has an empty component", text)
        if (component in UNSAFE_COMPONENTS or '/' in component or '\\' in component
                or not component.isprintable()):
            raise DateFormatError("Date component is not usable as a folder name", text)

    year, month, day = components
    return CalendarDate(year=year, month=month, day=day)


def extract_capture_date(file_path: Path) -> CalendarDate:
    """
    Read a photo's header and return its capture date.

    Raises:
        FileAccessError: If the file cannot be read
        FormatError: If the header does not contain the expected markers
        EncodingError: If the date bytes are not text
        DateFormatError: If the date text is malformed
    """
    header = read_header(file_path)
    date_field = scan_header(header)
    date = parse_date(date_field)
    logger.debug(f"Capture date of {file_path.name}: {date}")
    return date
