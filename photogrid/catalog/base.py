from typing import List, Protocol

from photogrid.domain.image import ImageRecord


class CatalogStore(Protocol):
    """Protocol for ordered image catalog implementations.

    Position 0 is always the newest record. Implementations assume a single caller.
    """

    def load(self) -> List[ImageRecord]:
        """Load all records from storage, newest first."""
        ...

    def records(self) -> List[ImageRecord]:
        """Get the records currently held in memory, newest first."""
        ...

    def create(self, record: ImageRecord) -> None:
        """Insert a record at position 0 and persist the catalog."""
        ...

    def delete(self, position: int) -> None:
        """Remove the record at a position and persist the catalog."""
        ...

    def __len__(self) -> int: ...
