from tests.fakes.fake_catalog_store import FakeCatalogStore
from tests.fakes.fake_encoder import fake_encoder

__all__ = ["FakeCatalogStore", "fake_encoder"]
