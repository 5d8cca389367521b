from textwrap import dedent
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from filestore_api.adapters.storage import BaseStorage, StorageFactory
from filestore_api.config.settings import Settings
from filestore_api.errors import (
    FilesApiError,
    handle_broad_exceptions,
    handle_files_api_errors,
    handle_http_exceptions,
    handle_request_validation_errors,
)
from filestore_api.routers.files import router as files_router
from filestore_api.routers.health import router as health_router

# Set up logging
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[BaseStorage] = None) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or Settings()

    app = FastAPI(
        title="Files API",
        summary="Create, read, update and delete the files of one storage directory",
        version="v1",
        description=dedent(
            """\
        Every response is a JSON envelope `{"message": ..., "content": ...}`;
        `content` is only present when there is something to return.

        | Status | Meaning |
        | --- | --- |
        | 200 | Operation succeeded |
        | 404 | The file does not exist |
        | 409 | The file already exists |
        | 422 | Missing or invalid request fields |
        """
        ),
        docs_url="/",  # its easier to find the docs when they live on the base url
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.storage = storage or StorageFactory.get_storage_handler(settings)
    logger.info(f"Serving files from {settings.storage_dir} ({settings.storage_backend})")

    app.include_router(files_router, tags=["files"])
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(
        exc_class_or_status_code=FilesApiError,
        handler=handle_files_api_errors,
    )
    app.add_exception_handler(
        exc_class_or_status_code=StarletteHTTPException,
        handler=handle_http_exceptions,
    )
    app.add_exception_handler(
        exc_class_or_status_code=RequestValidationError,
        handler=handle_request_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
