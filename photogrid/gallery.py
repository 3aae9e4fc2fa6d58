"""Display-side controller for the image grid."""

from enum import Enum
from typing import Callable, List, Optional

from loguru import logger

from photogrid.catalog.base import CatalogStore
from photogrid.domain.image import ImageRecord
from photogrid.errors import StoreError, StoreErrorKind

ImageEncoder = Callable[[bytes, tuple[int, int]], bytes]


class ImageSource(str, Enum):
    CAMERA = "camera"
    LIBRARY = "library"


class Gallery:
    """Keeps the displayed image list in step with a catalog store.

    The store pushes no notifications, so every insert and delete issued here is mirrored
    in the gallery's own list once the store call has succeeded. Positions used for
    deletion always come from that list.
    """

    def __init__(
        self,
        *,
        store: CatalogStore,
        encoder: ImageEncoder,
        target_size: tuple[int, int],
        on_change: Optional[Callable[["Gallery"], None]] = None,
    ):
        """Initialize the gallery.

        Args:
            store: Catalog store holding the persisted images
            encoder: Function turning raw image bytes into encoded bytes of a target size
            target_size: Size (width, height) images are resized to before storing
            on_change: Called with the gallery after every successful add or remove
        """
        self.store = store
        self.encoder = encoder
        self.target_size = target_size
        self.on_change = on_change
        self._items: List[ImageRecord] = []

    @property
    def items(self) -> List[ImageRecord]:
        """Images in display order, newest first."""
        return list(self._items)

    def start(self) -> None:
        """Load the catalog once. An unreadable catalog shows as an empty gallery."""
        try:
            self._items = self.store.load()
        except StoreError as e:
            if e.kind not in (StoreErrorKind.CORRUPT, StoreErrorKind.IO_FAILURE):
                raise
            logger.error(f"Could not load catalog, showing no images: {e}")
            self._items = []

    def add_picture(self, image_bytes: bytes, source: ImageSource) -> ImageRecord:
        """Resize, encode and store a captured or picked image.

        Raises:
            ImageProcessingError: If the image cannot be decoded.
            StoreError: If the catalog cannot be written.
        """
        logger.info(f"Adding picture from {source.value} ({len(image_bytes)} bytes)")
        record = ImageRecord(image_data=self.encoder(image_bytes, self.target_size))
        self.store.create(record)
        self._items.insert(0, record)
        self._notify()
        return record

    def remove_picture(self, position: int) -> None:
        """Delete the image shown at a position.

        Raises:
            StoreError: INDEX_OUT_OF_RANGE if nothing is shown at the position, IO_FAILURE if
                the catalog cannot be written.
        """
        if not 0 <= position < len(self._items):
            raise StoreError(
                StoreErrorKind.INDEX_OUT_OF_RANGE,
                f"No image at position {position}, gallery shows {len(self._items)}",
            )
        self.store.delete(position)
        del self._items[position]
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
