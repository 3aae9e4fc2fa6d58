"""JSON and image endpoints for the gallery.

The catalog store allows a single caller at a time. Every handler takes the router's
``asyncio.Lock`` before touching the gallery, and the blocking work (resizing, rewriting
the catalog file) runs in the thread pool so other requests keep being served.
"""

import asyncio
from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from loguru import logger

from photogrid.api.auth import verify_credentials
from photogrid.api.schemas import ImageItem
from photogrid.config import settings
from photogrid.errors import ImageProcessingError, StoreError, StoreErrorKind
from photogrid.gallery import Gallery, ImageSource


def _store_error_to_http(e: StoreError) -> HTTPException:
    if e.kind == StoreErrorKind.INDEX_OUT_OF_RANGE:
        return HTTPException(status_code=404, detail="Image not found")
    return HTTPException(status_code=500, detail="Image catalog unavailable")


def _create_list_endpoint(gallery: Gallery, lock: asyncio.Lock):
    """Create the image listing endpoint handler."""

    async def list_images(_: str = Depends(verify_credentials)) -> List[ImageItem]:
        async with lock:
            items = gallery.items
        return [ImageItem.from_record(i, record) for i, record in enumerate(items)]

    return list_images


def _create_image_endpoint(gallery: Gallery, lock: asyncio.Lock):
    """Create the image endpoint handler."""

    async def get_image(position: int, _: str = Depends(verify_credentials)) -> Response:
        async with lock:
            items = gallery.items
        if not 0 <= position < len(items):
            logger.warning(f"Image not found at position {position}")
            raise HTTPException(status_code=404, detail="Image not found")
        return Response(
            content=items[position].image_data,
            media_type="image/jpeg",
            headers={"Cache-Control": "no-cache"},
        )

    return get_image


def _create_upload_endpoint(gallery: Gallery, lock: asyncio.Lock):
    """Create the image upload endpoint handler."""

    async def upload_image(
        file: UploadFile = File(...),  # noqa: B008
        source: ImageSource = Form(ImageSource.LIBRARY),  # noqa: B008
        _: str = Depends(verify_credentials),
    ) -> ImageItem:
        content = await file.read(settings.max_upload_bytes + 1)
        if len(content) > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Image larger than {settings.max_upload_bytes} bytes",
            )

        try:
            async with lock:
                record = await run_in_threadpool(gallery.add_picture, content, source)
        except ImageProcessingError as e:
            logger.warning(f"Rejected upload {file.filename}: {e}")
            raise HTTPException(status_code=422, detail="Could not read image") from e
        except StoreError as e:
            logger.error(f"Error storing image: {e}")
            raise _store_error_to_http(e) from e
        return ImageItem.from_record(0, record)

    return upload_image


def _create_delete_endpoint(gallery: Gallery, lock: asyncio.Lock):
    """Create the image delete endpoint handler."""

    async def delete_image(position: int, _: str = Depends(verify_credentials)) -> Response:
        try:
            async with lock:
                await run_in_threadpool(gallery.remove_picture, position)
        except StoreError as e:
            if e.kind != StoreErrorKind.INDEX_OUT_OF_RANGE:
                logger.error(f"Error deleting image at position {position}: {e}")
            raise _store_error_to_http(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return delete_image


def get_endpoints_router(*, gallery: Gallery) -> APIRouter:
    router = APIRouter()
    lock = asyncio.Lock()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/images", response_model=List[ImageItem])(
        _create_list_endpoint(gallery, lock)
    )
    router.get("/api/images/{position}")(_create_image_endpoint(gallery, lock))
    router.post("/api/images", status_code=status.HTTP_201_CREATED, response_model=ImageItem)(
        _create_upload_endpoint(gallery, lock)
    )
    router.delete("/api/images/{position}", status_code=status.HTTP_204_NO_CONTENT)(
        _create_delete_endpoint(gallery, lock)
    )

    return router
