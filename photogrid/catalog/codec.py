"""Serialization of the full record sequence to and from the catalog file format."""

import json
from typing import Sequence

from pydantic import ValidationError

from photogrid.domain.image import CatalogDocument, ImageRecord
from photogrid.errors import DecodeError


def encode_all(records: Sequence[ImageRecord]) -> bytes:
    """Encode records, in the given order, as a UTF-8 JSON catalog document."""
    document = CatalogDocument(records=list(records))
    return json.dumps(document.model_dump(mode="json")).encode("utf-8")


def decode_all(data: bytes) -> list[ImageRecord]:
    """Decode a catalog document produced by :func:`encode_all`.

    Raises:
        DecodeError: If the bytes are not valid JSON, lack the catalog format marker,
            or contain a record that does not validate.
    """
    try:
        payload = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"Catalog data is not valid JSON: {e}") from e

    if not isinstance(payload, dict) or "format" not in payload:
        raise DecodeError("Catalog data has no format marker")

    try:
        document = CatalogDocument.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Catalog data is not a valid catalog document: {e}") from e
    return list(document.records)
