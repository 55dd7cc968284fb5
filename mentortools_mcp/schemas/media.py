"""
Input contracts for media storage files and folders.
"""

import base64
import binascii
import os

from pydantic import Field, model_validator

from ..library.constants import DEFAULT_MEDIA_LIMIT, MAX_LIMIT
from .base import Contract, PaginationInput, PositiveId, Title, extend, merge, pick

# Media storage lists are larger pages than the course endpoints.
MediaPaginationInput = extend(
    PaginationInput,
    "MediaPaginationInput",
    limit=(int, Field(
        default=DEFAULT_MEDIA_LIMIT, strict=True, ge=1, le=MAX_LIMIT,
        description="Maximum results to return",
    )),
)

# ---------------------------------------------------------------------- #
# Files
# ---------------------------------------------------------------------- #


class FileIdInput(Contract):
    file_id: PositiveId = Field(..., description="File ID in media storage")


class ParentFolderInput(Contract):
    parent_folder_id: PositiveId = Field(default=None, description="Parent folder ID (omit for root)")


class FilenameFilterInput(Contract):
    filename: str = Field(default=None, description="Filter by filename (partial match)")


ListFilesInput = merge(
    "ListFilesInput", ParentFolderInput, MediaPaginationInput, FilenameFilterInput,
    doc="List files inside one folder.",
)
ListAllFilesInput = merge(
    "ListAllFilesInput", MediaPaginationInput, FilenameFilterInput,
    doc="List files across all folders.",
)
CountFilesInput = pick(ListFilesInput, "CountFilesInput", "parent_folder_id")


class FileUpdateInput(Contract):
    name: Title = Field(..., description="New filename with extension")
    parent_folder_id: PositiveId = Field(default=None, description="Move to folder (omit for root)")


UpdateFileParams = merge("UpdateFileParams", FileIdInput, FileUpdateInput)


class UploadFileInput(Contract):
    """
    A file to upload, given either as a path readable by the server or as
    base64 content plus a filename.
    """

    file_path: str = Field(default=None, min_length=1, description="Path of a local file to upload")
    content_base64: str = Field(default=None, min_length=1, description="Base64-encoded file content")
    filename: Title = Field(
        default=None,
        description="Stored filename with extension (required with content_base64, defaults to the file's name)",
    )
    parent_folder_id: int = Field(
        default=None, strict=True, ge=0,
        description="Target folder ID; omit or use 0 for the root folder",
    )

    @model_validator(mode="after")
    def check_source(self) -> "UploadFileInput":
        if bool(self.file_path) == bool(self.content_base64):
            raise ValueError("Provide exactly one of 'file_path' or 'content_base64'")
        if self.content_base64 and not self.filename:
            raise ValueError("'filename' is required when uploading 'content_base64'")
        if self.content_base64:
            try:
                base64.b64decode(self.content_base64, validate=True)
            except binascii.Error:
                raise ValueError("'content_base64' is not valid base64")
        return self

    def resolved_filename(self) -> str:
        return self.filename or os.path.basename(self.file_path or "")

    def read_content(self) -> bytes:
        if self.content_base64:
            return base64.b64decode(self.content_base64)
        with open(self.file_path, "rb") as handle:
            return handle.read()


# ---------------------------------------------------------------------- #
# Folders
# ---------------------------------------------------------------------- #


class FolderIdInput(Contract):
    folder_id: PositiveId = Field(..., description="Folder ID")


ListFoldersInput = merge(
    "ListFoldersInput", ParentFolderInput, MediaPaginationInput,
    doc="List folders inside one parent folder.",
)
ListAllFoldersInput = extend(MediaPaginationInput, "ListAllFoldersInput", doc="List folders ignoring hierarchy.")
CountFoldersInput = pick(ListFoldersInput, "CountFoldersInput", "parent_folder_id")


class FolderCreateInput(Contract):
    name: Title = Field(..., description="Folder name")
    parent_folder_id: PositiveId = Field(default=None, description="Parent folder ID (omit for root)")


class FolderUpdateInput(Contract):
    name: Title = Field(..., description="New folder name")
    parent_folder_id: PositiveId = Field(default=None, description="Move to folder (omit for root)")


UpdateFolderParams = merge("UpdateFolderParams", FolderIdInput, FolderUpdateInput)
