"""Image domain models."""

import base64
from datetime import datetime, timezone
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

CATALOG_FORMAT = "photogrid.catalog"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ImageRecord(BaseModel):
    """Represents one image stored in the catalog.

    Records have no key of their own; they are identified by their position in the
    catalog, newest first.

    Attributes:
        image_data: The encoded image bytes (JPEG), serialized as base64.
        created_at: When the image was captured or imported.
    """

    model_config = ConfigDict(frozen=True)

    image_data: Annotated[
        bytes,
        BeforeValidator(lambda x: base64.b64decode(x, validate=True) if isinstance(x, str) else x),
        PlainSerializer(lambda x: base64.b64encode(x).decode(), return_type=str),
        Field(min_length=1),
    ]
    created_at: datetime = Field(default_factory=_utcnow)


class CatalogDocument(BaseModel):
    """The document written to the backing file: a format marker and the records in order."""

    format: Literal["photogrid.catalog"] = CATALOG_FORMAT
    records: list[ImageRecord] = []
