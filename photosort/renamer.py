"""Renamer module - strategies that move a photo to its archive location."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type
import errno
import logging
import os
import subprocess

from photosort.errors import RelocationError

logger = logging.getLogger(__name__)

# link() failures meaning the filesystem does not support hard links
NO_LINK_ERRNOS = {errno.EPERM, errno.EOPNOTSUPP, errno.ENOTSUP, errno.ENOSYS}


class Renamer(ABC):
    """Moves a file from its source path to its destination path."""

    @abstractmethod
    def relocate(self, source: Path, destination: Path) -> None:
        """
        Move ``source`` to ``destination``.

        Raises:
            RelocationError: If the move did not happen
        """

    def check_destination(self, destination: Path):
        if destination.exists():
            raise RelocationError(f"Destination already exists: {destination}")


class FileRenamer(Renamer):
    """
    Plain filesystem move.

    The destination is hard-linked to the source and the source unlinked, so an
    existing destination is never replaced. Filesystems without hard links fall
    back to a rename after checking the destination.
    """

    def relocate(self, source: Path, destination: Path) -> None:
        try:
            os.link(source, destination)
        except FileExistsError as e:
            raise RelocationError(f"Destination already exists: {destination}") from e
        except OSError as e:
            if e.errno not in NO_LINK_ERRNOS:
                raise RelocationError(f"Failed to rename {source} to {destination}: {e}") from e
            logger.debug(f"Hard links unavailable ({e.strerror}), renaming {source}")
            self.rename(source, destination)
            return

        try:
            source.unlink()
        except OSError as e:
            raise RelocationError(f"Linked {destination} but could not remove {source}: {e}") from e

    def rename(self, source: Path, destination: Path):
        self.check_destination(destination)
        try:
            source.rename(destination)
        except OSError as e:
            raise RelocationError(f"Failed to rename {source} to {destination}: {e}") from e


class GitRenamer(Renamer):
    """Moves the file with ``git mv`` so the repository records the rename."""

    def __init__(self, executable: str = 'git'):
        self.executable = executable

    def relocate(self, source: Path, destination: Path) -> None:
        self.check_destination(destination)
        command = [self.executable, 'mv', str(source), str(destination)]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command, capture_output=True, encoding='utf-8', errors='replace'
            )
        except OSError as e:
            raise RelocationError(f"Could not run {self.executable}: {e}") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise RelocationError(f"git mv failed: {detail}")


RENAMERS: Dict[str, Type[Renamer]] = {
    'git': GitRenamer,
    'file': FileRenamer,
}


def get_renamer(name: Optional[str] = None) -> Renamer:
    """
    Select the move strategy by name.

    "git" selects GitRenamer; any other value, or none, selects FileRenamer.
    """
    renamer_class = RENAMERS.get(name, FileRenamer) if name else FileRenamer
    return renamer_class()
