"""CLI interface module - command-line arguments and user interaction."""

import sys
from pathlib import Path
from typing import Optional
import logging

import click

from photosort.errors import PhotoSortError
from photosort.organizer import get_archive_root, organize_photo
from photosort.renamer import get_renamer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@click.command()
@click.argument(
    'file',
    type=click.Path(dir_okay=False, path_type=Path)
)
@click.argument('renamer', required=False)
@click.option(
    '--dry-run',
    is_flag=True,
    default=False,
    help='Show where the photo would go without moving it'
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    default=False,
    help='Enable verbose output'
)
def main(file: Path, renamer: Optional[str], dry_run: bool, verbose: bool):
    """
    Photo Sort - file a photo under ~/annex/photos/YYYY/MM/DD by its capture date.

    FILE is a JPEG or CR2 image. Pass "git" as RENAMER to move it with
    "git mv"; anything else moves it with a plain rename.
    """
    setup_logging(verbose)
    logger.debug(f"photosort {file}")

    try:
        archive_root = get_archive_root()
        destination = organize_photo(file, archive_root, get_renamer(renamer), dry_run=dry_run)

        if dry_run:
            print(f"{file}  ->  {destination.path}  (dry run, nothing moved)")
        else:
            print(f"{file}  ->  {destination.path}")

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except PhotoSortError as e:
        logger.debug(f"Failed on {file}", exc_info=True)
        click.echo(f"Error while {e.stage}: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
