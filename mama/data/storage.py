"""
Flat-file storage for journal entries.

One entry per line in its pipe-delimited storage form. Every save rewrites
the whole file through a temporary sibling that replaces the target, so a
failed write never leaves a half-written data file behind.
"""
import logging
import os
from pathlib import Path

from mama.errors import PersistenceError, StorageFormatError
from mama.models import EntryList, entry_from_storage

logger = logging.getLogger(__name__)


class Storage:
    """
    Loads and saves the entry list.

    A missing data file is an empty journal. A malformed line fails the
    whole load rather than silently dropping data.
    """

    def __init__(self, filepath: Path):
        """
        Initialize storage.

        Args:
            filepath: Path to the data file (created on first save)
        """
        self.filepath = Path(filepath)

    def load(self) -> EntryList:
        """
        Read all entries from disk.

        Returns:
            EntryList in file order (empty if the file does not exist)

        Raises:
            StorageFormatError: If any non-blank line cannot be parsed
        """
        if not self.filepath.exists():
            logger.info("No data file at %s, starting with an empty journal", self.filepath)
            return EntryList()

        loaded = []
        with open(self.filepath, "rb") as f:
            for line_number, raw in enumerate(f, 1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    raise StorageFormatError(f"Line is not valid UTF-8: {e.reason}", line_number) from e
                if not line.strip():
                    logger.info("Skipping blank line %d in %s", line_number, self.filepath)
                    continue
                try:
                    loaded.append(entry_from_storage(line))
                except StorageFormatError as e:
                    raise StorageFormatError(str(e), line_number) from e

        logger.info("Loaded %d entries from %s", len(loaded), self.filepath)
        return EntryList(loaded)

    def save(self, entries: EntryList) -> None:
        """
        Rewrite the data file from the full backing list.

        Args:
            entries: Entry list to persist (the shown filter is ignored)

        Raises:
            PersistenceError: If the file cannot be written
        """
        tmp = self.filepath.with_name(self.filepath.name + ".tmp")
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, 'w', encoding='utf-8') as f:
                for entry in entries:
                    f.write(entry.to_storage_string() + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.filepath)
        except OSError as e:
            logger.error("Failed to save %d entries to %s", entries.full_size(),
                         self.filepath, exc_info=True)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise PersistenceError(
                "Failed to save updated data to disk. "
                "Please check your file permissions or try again."
            ) from e
