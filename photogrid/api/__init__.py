from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from photogrid.api.endpoints import get_endpoints_router
from photogrid.gallery import Gallery


def create_app(*, gallery: Gallery) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(gallery=gallery))

    return app
