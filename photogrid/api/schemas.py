from datetime import datetime

from pydantic import BaseModel, Field

from photogrid.domain.image import ImageRecord


class ImageItem(BaseModel):
    """An image as listed by the API, without its bytes."""

    position: int = Field(..., description="Position in the gallery, 0 is the newest image")
    created_at: datetime
    size: int = Field(..., description="Size of the encoded image in bytes")
    url: str = Field(..., description="Where to fetch the encoded image")

    @classmethod
    def from_record(cls, position: int, record: ImageRecord) -> "ImageItem":
        return cls(
            position=position,
            created_at=record.created_at,
            size=len(record.image_data),
            url=f"/api/images/{position}",
        )
