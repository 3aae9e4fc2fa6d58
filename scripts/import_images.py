"""CLI for importing a folder of images into a local image catalog"""

import argparse
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from photogrid.catalog.local import LocalCatalogStore
from photogrid.config import settings
from photogrid.domain.image import ImageRecord
from photogrid.errors import ImageProcessingError
from photogrid.imaging.resize import resize_image

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"}


def find_images(folder: Path) -> list[Path]:
    """Image files in a folder, oldest first so the newest ends up at position 0."""
    files = [p for p in folder.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES]
    return sorted(files, key=lambda p: p.stat().st_mtime)


def main(in_folder: str, catalog: str) -> int:
    store = LocalCatalogStore(catalog)
    store.load()

    imported = 0
    for path in find_images(Path(in_folder)):
        try:
            image_data = resize_image(
                path.read_bytes(), settings.image_target_size, quality=settings.jpeg_quality
            )
        except ImageProcessingError as e:
            logger.warning(f"Skipping {path.name}: {e}")
            continue

        created_at = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
        store.create(ImageRecord(image_data=image_data, created_at=created_at))
        imported += 1

    logger.info(f"Imported {imported} images, catalog now holds {len(store)}")
    return imported


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--in-folder", type=str, required=True, help="Folder containing image files"
    )
    parser.add_argument(
        "--catalog",
        type=str,
        required=False,
        help="Catalog file to import into",
        default=str(settings.catalog_path),
    )

    args = parser.parse_args()

    main(in_folder=args.in_folder, catalog=args.catalog)
