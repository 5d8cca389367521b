####################################
# --- Request/response schemas --- #
####################################

from typing import List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    field_validator,
)


def _require_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class CreateFileRequest(BaseModel):
    """Request body for `POST /files`."""
    filename: StrictStr = Field(
        description="Name of the file to create inside the storage directory.",
        json_schema_extra={"example": "a.txt"},
    )
    content: StrictStr = Field(
        description="Text content of the new file.",
        json_schema_extra={"example": "hello"},
    )

    @field_validator("filename")
    @classmethod
    def check_filename_is_a_plain_name(cls, value: str) -> str:
        _require_not_blank(value)
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError("must be a plain file name without directories")
        return value

    @field_validator("content")
    @classmethod
    def check_content_is_not_blank(cls, value: str) -> str:
        return _require_not_blank(value)


class UpdateFileRequest(BaseModel):
    """Request body for `PUT|PATCH /files/:filename`."""
    content: StrictStr = Field(
        description="New text content. Replaces the whole file.",
        json_schema_extra={"example": "world"},
    )

    @field_validator("content")
    @classmethod
    def check_content_is_not_blank(cls, value: str) -> str:
        return _require_not_blank(value)


class MessageResponse(BaseModel):
    """Envelope returned by operations without a payload."""
    message: str = Field(description="A message about the operation.")

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Guardado con éxito"}}
    )


class FileListResponse(BaseModel):
    """Response model for `GET /files`."""
    message: str
    content: List[str] = Field(description="Names of the stored files.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Listado de ficheros",
                "content": ["a.txt", "notes.md"],
            }
        }
    )


class FileContentResponse(BaseModel):
    """Response model for `GET /files/:filename`."""
    message: str
    content: str = Field(description="The full content of the file.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Archivo leído con éxito",
                "content": "hello",
            }
        }
    )
