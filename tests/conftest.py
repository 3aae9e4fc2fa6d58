import io
import os
from datetime import datetime, timezone
from pathlib import Path

# Settings are read at import time, so credentials must exist before photogrid is imported.
os.environ.setdefault("AUTH_USERNAME", "admin")
os.environ.setdefault("AUTH_PASSWORD", "password")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from PIL import Image as PILImage  # noqa: E402

from photogrid.api import create_app  # noqa: E402
from photogrid.domain.image import ImageRecord  # noqa: E402
from photogrid.gallery import Gallery  # noqa: E402
from tests.fakes import FakeCatalogStore, fake_encoder  # noqa: E402


@pytest.fixture
def first_record() -> ImageRecord:
    return ImageRecord(
        image_data=b"\xff\xd8first fake jpeg",
        created_at=datetime(2024, 1, 20, 9, 30, 0, 123456, tzinfo=timezone.utc),
    )


@pytest.fixture
def second_record() -> ImageRecord:
    return ImageRecord(
        image_data=b"\xff\xd8second fake jpeg",
        created_at=datetime(2024, 1, 21, 14, 5, 59, tzinfo=timezone.utc),
    )


@pytest.fixture
def third_record() -> ImageRecord:
    return ImageRecord(
        image_data=b"\xff\xd8third fake jpeg",
        created_at=datetime(2024, 1, 22, 23, 59, 59, 999999, tzinfo=timezone.utc),
    )


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Path to a catalog file that does not exist yet."""
    return tmp_path / "data" / "catalog.json"


@pytest.fixture
def png_bytes() -> bytes:
    """A small real PNG image."""
    buffer = io.BytesIO()
    PILImage.new("RGB", (64, 48), color=(200, 120, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def fake_store() -> FakeCatalogStore:
    return FakeCatalogStore()


@pytest.fixture
def gallery(fake_store: FakeCatalogStore) -> Gallery:
    gallery = Gallery(store=fake_store, encoder=fake_encoder, target_size=(300, 300))
    gallery.start()
    return gallery


@pytest.fixture
def test_client(gallery: Gallery) -> TestClient:
    """Create test client with fake implementations, authenticated as the test user."""
    client = TestClient(create_app(gallery=gallery))
    client.auth = ("admin", "password")
    return client
