"""
Flat File Storage Backend

Stores the slug mapping in a plain text file, one record per line:

    <slug> <url>

The URL is everything after the first space, so it may itself contain
spaces but never a newline. Slugs of different lengths may coexist in the
same file.

Writes go to a temporary file in the target's directory which then
replaces the target, so a crash mid-write never leaves a truncated file.
"""

import contextlib
import logging
import os
import tempfile
from typing import Mapping

from shortlink.core.validators import strip_newlines
from shortlink.storage.interface import StorageBackend

logger = logging.getLogger(__name__)

TEMP_FILE_PREFIX = "shortlink-storage"


def parse_line(line: str):
    """
    Split one storage record into (slug, url).

    A trailing "\n" or "\r\n" is removed first.

    Returns:
        Tuple of (slug, url), or None if the line has no space separator
    """
    line = line.rstrip("\n")
    if line.endswith("\r"):
        line = line[:-1]
    slug, sep, url = line.partition(" ")
    if not sep:
        return None
    return slug, url


def _discard(temp_path: str) -> None:
    with contextlib.suppress(OSError):
        os.unlink(temp_path)


def format_line(slug: str, url: str) -> str:
    """Render one storage record, dropping newlines from the URL."""
    return f"{slug} {strip_newlines(url)}\n"


class FlatFileStorage(StorageBackend):
    """
    Storage backend for the line-based text format.
    """

    def __init__(self, path: str):
        """
        Args:
            path: Location of the storage file (relative or absolute)
        """
        self.path = path

    def load(self) -> dict[str, str]:
        """
        Read all records from the storage file.

        A missing file yields an empty mapping. Lines without a space are
        skipped. A read error part way through is logged and the records
        read so far are kept.
        """
        entries: dict[str, str] = {}
        try:
            handle = open(self.path, "r", encoding="utf-8", newline="\n")
        except FileNotFoundError:
            return entries
        except OSError as e:
            logger.error(f"opening storage file: {self.path} - {e}")
            return entries

        with handle:
            try:
                for line in handle:
                    record = parse_line(line)
                    if record is None:
                        continue
                    slug, url = record
                    entries[slug] = url
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"reading storage file: {self.path} - {e}")

        return entries

    def persist(self, mapping: Mapping[str, str]) -> bool:
        """
        Atomically rewrite the storage file with the full mapping.

        On failure the existing file is left untouched and the error is
        logged; the caller's in-memory state is not rolled back.
        """
        target = os.path.abspath(self.path)
        directory = os.path.dirname(target)

        try:
            fd, temp_path = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, dir=directory)
        except OSError as e:
            logger.error(f"creating temporary storage file: {e}")
            return False

        try:
            handle = os.fdopen(fd, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            os.close(fd)
            logger.error(f"opening temporary storage file: {temp_path} - {e}")
            _discard(temp_path)
            return False

        try:
            with handle:
                for slug, url in mapping.items():
                    handle.write(format_line(slug, url))
            os.replace(temp_path, target)
        except OSError as e:
            logger.error(f"writing storage file: {target} - {e}")
            _discard(temp_path)
            return False

        return True

    def describe(self) -> str:
        return os.path.abspath(self.path)
