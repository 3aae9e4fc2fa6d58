import sys
from functools import partial

from loguru import logger

from photogrid.api import create_app
from photogrid.catalog.local import LocalCatalogStore
from photogrid.config import settings
from photogrid.gallery import Gallery
from photogrid.imaging.resize import resize_image

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Opening image catalog at {settings.catalog_path}")
store = LocalCatalogStore(settings.catalog_path)
gallery = Gallery(
    store=store,
    encoder=partial(resize_image, quality=settings.jpeg_quality),
    target_size=settings.image_target_size,
)
gallery.start()
app = create_app(gallery=gallery)
