"""Tests for keeping the displayed gallery in step with the catalog."""

from pathlib import Path

import pytest

from photogrid.catalog.local import LocalCatalogStore
from photogrid.domain.image import ImageRecord
from photogrid.errors import ImageProcessingError, StoreError, StoreErrorKind
from photogrid.gallery import Gallery, ImageSource
from photogrid.imaging.resize import resize_image
from tests.fakes import FakeCatalogStore, fake_encoder


def test_start_shows_stored_images(first_record: ImageRecord, second_record: ImageRecord) -> None:
    store = FakeCatalogStore([second_record, first_record])
    gallery = Gallery(store=store, encoder=fake_encoder, target_size=(300, 300))

    gallery.start()

    assert gallery.items == [second_record, first_record]
    assert store.load_calls == 1, "Catalog should be loaded exactly once"


@pytest.mark.parametrize("kind", [StoreErrorKind.CORRUPT, StoreErrorKind.IO_FAILURE])
def test_start_with_unreadable_catalog_shows_nothing(kind: StoreErrorKind) -> None:
    """Test that a broken catalog is treated as no data rather than a crash."""
    store = FakeCatalogStore()
    store.fail_with = kind
    gallery = Gallery(store=store, encoder=fake_encoder, target_size=(300, 300))

    gallery.start()

    assert gallery.items == []


def test_add_picture_encodes_and_prepends(gallery: Gallery, fake_store: FakeCatalogStore) -> None:
    first = gallery.add_picture(b"raw one", ImageSource.LIBRARY)
    second = gallery.add_picture(b"raw two", ImageSource.CAMERA)

    assert second.image_data == b"300x300:raw two", "Image should be encoded at the target size"
    assert gallery.items == [second, first], "Newest picture should be shown first"
    assert fake_store.records() == gallery.items, "Display list should mirror the store"


def test_add_picture_undecodable_changes_nothing(
    gallery: Gallery, fake_store: FakeCatalogStore
) -> None:
    with pytest.raises(ImageProcessingError):
        gallery.add_picture(b"not an image", ImageSource.LIBRARY)

    assert gallery.items == []
    assert len(fake_store) == 0


def test_add_picture_store_failure_is_not_shown(
    gallery: Gallery, fake_store: FakeCatalogStore
) -> None:
    """Test that a picture the store failed to persist is not displayed."""
    fake_store.fail_with = StoreErrorKind.IO_FAILURE

    with pytest.raises(StoreError):
        gallery.add_picture(b"raw", ImageSource.CAMERA)

    assert gallery.items == []


def test_remove_picture_mirrors_store(gallery: Gallery, fake_store: FakeCatalogStore) -> None:
    oldest = gallery.add_picture(b"a", ImageSource.LIBRARY)
    gallery.add_picture(b"b", ImageSource.LIBRARY)
    newest = gallery.add_picture(b"c", ImageSource.LIBRARY)

    gallery.remove_picture(1)

    assert gallery.items == [newest, oldest]
    assert fake_store.records() == gallery.items


@pytest.mark.parametrize("position", [-1, 1])
def test_remove_picture_out_of_range(gallery: Gallery, position: int) -> None:
    gallery.add_picture(b"a", ImageSource.LIBRARY)

    with pytest.raises(StoreError) as exc_info:
        gallery.remove_picture(position)

    assert exc_info.value.kind == StoreErrorKind.INDEX_OUT_OF_RANGE
    assert len(gallery.items) == 1


def test_remove_picture_store_failure_keeps_item(
    gallery: Gallery, fake_store: FakeCatalogStore
) -> None:
    gallery.add_picture(b"a", ImageSource.LIBRARY)
    fake_store.fail_with = StoreErrorKind.IO_FAILURE

    with pytest.raises(StoreError):
        gallery.remove_picture(0)

    assert len(gallery.items) == 1


def test_on_change_called_after_each_mutation(fake_store: FakeCatalogStore) -> None:
    """Test that the injected callback hears about every successful add and remove."""
    sizes: list[int] = []
    gallery = Gallery(
        store=fake_store,
        encoder=fake_encoder,
        target_size=(10, 10),
        on_change=lambda g: sizes.append(len(g.items)),
    )
    gallery.start()

    gallery.add_picture(b"a", ImageSource.CAMERA)
    gallery.add_picture(b"b", ImageSource.CAMERA)
    gallery.remove_picture(0)
    with pytest.raises(StoreError):
        gallery.remove_picture(5)

    assert sizes == [1, 2, 1], "Callback should fire once per successful mutation"


def test_gallery_with_local_store_survives_restart(catalog_path: Path, png_bytes: bytes) -> None:
    """Test the full path from raw image to catalog file and back."""
    gallery = Gallery(
        store=LocalCatalogStore(catalog_path), encoder=resize_image, target_size=(32, 32)
    )
    gallery.start()
    gallery.add_picture(png_bytes, ImageSource.LIBRARY)
    gallery.add_picture(png_bytes, ImageSource.CAMERA)
    gallery.remove_picture(1)

    restarted = Gallery(
        store=LocalCatalogStore(catalog_path), encoder=resize_image, target_size=(32, 32)
    )
    restarted.start()

    assert restarted.items == gallery.items
    assert len(restarted.items) == 1
