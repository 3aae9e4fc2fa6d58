from pathlib import Path
from typing import List

from loguru import logger

from photogrid.catalog.base import CatalogStore
from photogrid.catalog.codec import decode_all, encode_all
from photogrid.domain.image import ImageRecord
from photogrid.errors import DecodeError, StoreError, StoreErrorKind
from photogrid.utils.fileio import atomic_write_bytes


class LocalCatalogStore(CatalogStore):
    """Catalog store that keeps every record in a single local JSON file.

    The whole file is rewritten on each mutation. The store caches the sequence it last
    loaded or persisted and never re-reads before writing, so it must be the only writer
    to its file. It holds no lock: callers from more than one thread have to serialize
    access themselves.
    """

    def __init__(self, filepath: str | Path) -> None:
        """Initialize LocalCatalogStore.

        Args:
            filepath: Path to the catalog file. Nothing is read until load() is called or
                the first mutation happens; a missing file is an empty catalog.
        """
        self._filepath = Path(filepath)
        self._records: List[ImageRecord] | None = None

    @property
    def filepath(self) -> Path:
        return self._filepath

    def load(self) -> List[ImageRecord]:
        """Read the catalog file, newest record first.

        Raises:
            StoreError: CORRUPT if the file cannot be decoded, IO_FAILURE if it cannot be read.
        """
        self._records = self._read()
        return list(self._records)

    def _read(self) -> List[ImageRecord]:
        if not self._filepath.exists():
            logger.debug(f"No catalog at {self._filepath}, starting empty")
            return []

        try:
            data = self._filepath.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read catalog {self._filepath}: {e}")
            raise StoreError(StoreErrorKind.IO_FAILURE, f"Cannot read {self._filepath}") from e

        try:
            records = decode_all(data)
        except DecodeError as e:
            logger.error(f"Catalog {self._filepath} is corrupt: {e}")
            raise StoreError(StoreErrorKind.CORRUPT, f"Cannot decode {self._filepath}") from e

        logger.info(f"Loaded {len(records)} images from {self._filepath}")
        return records

    def records(self) -> List[ImageRecord]:
        """Get the records held in memory, loading the file first if needed."""
        return list(self._ensure_loaded())

    def create(self, record: ImageRecord) -> None:
        """Insert a record at position 0 and rewrite the catalog.

        The in-memory insert is rolled back if the write fails.
        """
        records = self._ensure_loaded()
        records.insert(0, record)
        try:
            self._persist(records)
        except StoreError:
            records.pop(0)
            raise
        logger.debug(f"Added image ({len(record.image_data)} bytes), catalog size {len(records)}")

    def delete(self, position: int) -> None:
        """Remove the record at a position, shifting later records down by one.

        Raises:
            StoreError: INDEX_OUT_OF_RANGE unless 0 <= position < len(self), IO_FAILURE if the
                write fails (the removed record is put back).
        """
        records = self._ensure_loaded()
        if not 0 <= position < len(records):
            raise StoreError(
                StoreErrorKind.INDEX_OUT_OF_RANGE,
                f"Position {position} out of range for catalog of {len(records)} images",
            )

        removed = records.pop(position)
        try:
            self._persist(records)
        except StoreError:
            records.insert(position, removed)
            raise
        logger.debug(f"Deleted image at position {position}, catalog size {len(records)}")

    def __len__(self) -> int:
        return len(self._ensure_loaded())

    def _ensure_loaded(self) -> List[ImageRecord]:
        if self._records is None:
            self._records = self._read()
        return self._records

    def _persist(self, records: List[ImageRecord]) -> None:
        try:
            atomic_write_bytes(self._filepath, encode_all(records))
        except OSError as e:
            logger.error(f"Failed to write catalog {self._filepath}: {e}")
            raise StoreError(StoreErrorKind.IO_FAILURE, f"Cannot write {self._filepath}") from e
