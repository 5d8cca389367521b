import logging

from fastapi import (
    APIRouter,
    Depends,
    Path,
    status
)

from filestore_api import messages
from filestore_api.adapters.storage import BaseStorage
from filestore_api.dependencies import get_storage
from filestore_api.errors import FileConflictError, FileMissingError
from filestore_api.schemas import (
    CreateFileRequest,
    FileContentResponse,
    FileListResponse,
    MessageResponse,
    UpdateFileRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
INVALID_RESPONSE = {422: {"description": "Missing or invalid fields"}}


@router.get("/files", response_model=FileListResponse)
async def list_files(storage: BaseStorage = Depends(get_storage)) -> FileListResponse:
    """
    List every file in the storage directory.

    Returns:
        FileListResponse: the file names under `content`
    """
    return FileListResponse(message=messages.FILES_LISTED, content=storage.list())


@router.post(
    "/files",
    response_model=MessageResponse,
    responses={status.HTTP_409_CONFLICT: {"model": MessageResponse}, **INVALID_RESPONSE},
)
async def create_file(
    body: CreateFileRequest,
    storage: BaseStorage = Depends(get_storage),
) -> MessageResponse:
    """
    Create a new file. Never overwrites: an existing name is answered with 409.

    Args:
        body: the file name and its content

    Returns:
        MessageResponse: confirmation of the write
    """
    if storage.exists(body.filename):
        logger.info(f"Refused to create '{body.filename}': already exists")
        raise FileConflictError(messages.FILE_ALREADY_EXISTS)

    storage.write(body.filename, body.content.encode("utf-8"))
    logger.info(f"Created '{body.filename}'")
    return MessageResponse(message=messages.FILE_SAVED)


@router.get(
    "/files/{filename}",
    response_model=FileContentResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_file(
    filename: str = Path(..., description="Name of the file inside the storage directory"),
    storage: BaseStorage = Depends(get_storage),
) -> FileContentResponse:
    """Return the full content of a file."""
    if not storage.exists(filename):
        raise FileMissingError(messages.FILE_NOT_FOUND)

    content = storage.read(filename).decode("utf-8")
    return FileContentResponse(message=messages.FILE_READ, content=content)


@router.put(
    "/files/{filename}",
    response_model=MessageResponse,
    responses={**NOT_FOUND_RESPONSE, **INVALID_RESPONSE},
)
@router.patch(
    "/files/{filename}",
    name="patch_file",
    response_model=MessageResponse,
    responses={**NOT_FOUND_RESPONSE, **INVALID_RESPONSE},
)
async def update_file(
    body: UpdateFileRequest,
    filename: str = Path(..., description="Name of the file inside the storage directory"),
    storage: BaseStorage = Depends(get_storage),
) -> MessageResponse:
    """
    Replace the whole content of an existing file.

    PUT and PATCH behave the same: there is no partial update.
    """
    if not storage.exists(filename):
        logger.info(f"Refused to update '{filename}': does not exist")
        raise FileMissingError(messages.FILE_DOES_NOT_EXIST)

    storage.write(filename, body.content.encode("utf-8"))
    logger.info(f"Updated '{filename}'")
    return MessageResponse(message=messages.FILE_UPDATED)


@router.delete(
    "/files/{filename}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_file(
    filename: str = Path(..., description="Name of the file inside the storage directory"),
    storage: BaseStorage = Depends(get_storage),
) -> MessageResponse:
    """Delete a file from storage."""
    if not storage.exists(filename):
        logger.info(f"Refused to delete '{filename}': does not exist")
        raise FileMissingError(messages.FILE_DOES_NOT_EXIST)

    storage.delete(filename)
    logger.info(f"Deleted '{filename}'")
    return MessageResponse(message=messages.FILE_DELETED)
