"""Date organizer module - builds the archive path (YYYY/MM/DD) and files the photo there."""

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import logging
import os

from photosort.analyzer import CalendarDate, extract_capture_date
from photosort.errors import ConfigError, FileAccessError
from photosort.renamer import Renamer

logger = logging.getLogger(__name__)

# Archive location relative to the home directory
ARCHIVE_SUBDIR = Path("annex") / "photos"

# Checked in order; USERPROFILE covers Windows shells without HOME
HOME_VARIABLES = ('HOME', 'USERPROFILE')


@dataclass(frozen=True)
class Destination:
    """Resolved archive location of a photo."""

    path: Path
    directory: Path


def get_archive_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Build the archive root from the home directory.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        <home>/annex/photos

    Raises:
        ConfigError: If no home directory variable is set
    """
    if environ is None:
        environ = os.environ

    for name in HOME_VARIABLES:
        home = environ.get(name)
        if home:
            return Path(home) / ARCHIVE_SUBDIR

    raise ConfigError("$HOME env var not available")


def get_date_folder(date: CalendarDate) -> Path:
    """
    Generate folder path based on date (YYYY/MM/DD format).

    Args:
        date: CalendarDate parsed from the header

    Returns:
        Relative Path object representing the folder
    """
    return Path(date.year) / date.month / date.day


def resolve_destination(archive_root: Path, date: CalendarDate, filename: str) -> Destination:
    """
    Compute where a photo belongs in the archive. Does no I/O.

    Args:
        archive_root: Root folder of the archive
        date: Capture date of the photo
        filename: Base name of the photo

    Returns:
        Destination with the full path and its parent folder
    """
    path = archive_root / get_date_folder(date) / filename
    return Destination(path=path, directory=path.parent)


def organize_photo(
    file_path: Path,
    archive_root: Path,
    renamer: Renamer,
    dry_run: bool = False
) -> Destination:
    """
    File a single photo under the archive by its capture date.

    The destination folder is created before the move, and the move is always
    the last step, so a failure never leaves the source missing.

    Args:
        file_path: Photo to file
        archive_root: Root folder of the archive
        renamer: Strategy performing the move
        dry_run: Resolve the destination only; create and move nothing

    Returns:
        Destination the photo was (or would be) moved to
    """
    date = extract_capture_date(file_path)
    destination = resolve_destination(archive_root, date, file_path.name)

    logger.debug(f"input path: {file_path}")
    logger.debug(f"output path: {destination.path}")

    if dry_run:
        logger.info(f"Dry run: {file_path} would be moved to {destination.path}")
        return destination

    try:
        destination.directory.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise FileAccessError(
            f"Failed to create {destination.directory}: {e}",
            stage="creating destination directory"
        ) from e

    renamer.relocate(file_path, destination.path)
    logger.info(f"Moved {file_path} -> {destination.path}")
    return destination
