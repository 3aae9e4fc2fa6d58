"""Ordered, file-backed catalog of image records."""

from photogrid.catalog.base import CatalogStore
from photogrid.catalog.codec import decode_all, encode_all
from photogrid.catalog.local import LocalCatalogStore

__all__ = [
    "CatalogStore",
    "LocalCatalogStore",
    "decode_all",
    "encode_all",
]
