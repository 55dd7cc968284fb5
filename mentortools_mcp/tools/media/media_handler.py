"""
MCP tools that expose Mentortools media storage (files and folders).
"""

import logging

from ...library.api_client import MentortoolsClient
from ...library.common_utils import format_json
from ...library.media import MentortoolsFiles, MentortoolsFolders
from ...schemas import (
    CountFilesInput,
    CountFoldersInput,
    EmptyInput,
    FileIdInput,
    FolderCreateInput,
    FolderIdInput,
    ListAllFilesInput,
    ListAllFoldersInput,
    ListFilesInput,
    ListFoldersInput,
    UpdateFileParams,
    UpdateFolderParams,
    UploadFileInput,
)
from ..mcp_registry import CREATE, DELETE, READ_ONLY, UPDATE, ToolRegistry

logger = logging.getLogger(__name__)


def register_media_tools(registry: ToolRegistry, client: MentortoolsClient) -> None:
    files = MentortoolsFiles(client)
    folders = MentortoolsFolders(client)

    # ---------------------------- Files ---------------------------- #

    @registry.tool("mentortools_list_files", ListFilesInput, title="List Files", hints=READ_ONLY)
    def mentortools_list_files(params) -> str:
        """
        List files in media storage, organized by folder.

        Args:
          - parent_folder_id (number, optional): Folder ID (omit for root)
          - limit (number, optional): Max results (default: 100)
          - offset (number, optional): Pagination offset
          - filename (string, optional): Filter by filename (partial match)

        Returns: Array of files with id, name, file_id, extension, size, etc.
        """
        return format_json(files.list_files(params.limit, params.offset, params.parent_folder_id, params.filename))

    @registry.tool("mentortools_list_all_files", ListAllFilesInput, title="List All Files", hints=READ_ONLY)
    def mentortools_list_all_files(params) -> str:
        """
        List all files in media storage, ignoring folder structure.

        Args:
          - limit (number, optional): Max results (default: 100)
          - offset (number, optional): Pagination offset
          - filename (string, optional): Filter by filename (partial match)

        Returns: Array of all files
        """
        return format_json(files.list_all_files(params.limit, params.offset, params.filename))

    @registry.tool("mentortools_count_files", CountFilesInput, title="Count Files", hints=READ_ONLY)
    def mentortools_count_files(params) -> str:
        """
        Get file count in a folder.

        Args:
          - parent_folder_id (number, optional): Folder ID (omit for root)

        Returns: Number of files
        """
        return f"File count: {files.count_files(params.parent_folder_id)}"

    @registry.tool("mentortools_count_all_files", EmptyInput, title="Count All Files", hints=READ_ONLY)
    def mentortools_count_all_files(params) -> str:
        """
        Get total file count in media storage (ignoring folders).

        Returns: Total number of files
        """
        return f"Total files: {files.count_all_files()}"

    @registry.tool("mentortools_get_file", FileIdInput, title="Get File", hints=READ_ONLY)
    def mentortools_get_file(params) -> str:
        """
        Get file metadata by ID.

        Args:
          - file_id (number): File ID

        Returns: File info with name, file_id (hash), extension, size, etc.
        """
        return format_json(files.get_file(params.file_id))

    @registry.tool("mentortools_upload_file", UploadFileInput, title="Upload File", hints=CREATE)
    def mentortools_upload_file(params) -> str:
        """
        Upload a file to media storage.

        Pass either file_path (a file readable by this server) or
        content_base64 together with filename.

        Args:
          - file_path (string, optional): Local path of the file to upload
          - content_base64 (string, optional): Base64-encoded file content
          - filename (string, optional): Stored filename; required with content_base64
          - parent_folder_id (number, optional): Target folder (omit or 0 for root)

        Returns: Metadata of the uploaded file
        """
        filename = params.resolved_filename()
        content = params.read_content()
        logger.info(f"Uploading {filename} ({len(content)} bytes)")
        result = files.upload_file(content, filename, params.parent_folder_id)
        return "File uploaded successfully.\n\n" + format_json(result)

    @registry.tool("mentortools_update_file", UpdateFileParams, title="Update File", hints=UPDATE)
    def mentortools_update_file(params) -> str:
        """
        Update file metadata (rename or move to folder).

        Args:
          - file_id (number, required): File ID
          - name (string, required): New filename with extension
          - parent_folder_id (number, optional): Move to folder (omit for root)

        Returns: Success status
        """
        updated = files.update_file(params.file_id, params.to_payload("file_id"))
        return "File updated successfully" if updated else "File update failed"

    @registry.tool("mentortools_delete_file", FileIdInput, title="Delete File", hints=DELETE)
    def mentortools_delete_file(params) -> str:
        """
        Delete a file from media storage.

        Args:
          - file_id (number): File ID

        Returns: Success status
        """
        deleted = files.delete_file(params.file_id)
        return "File deleted successfully" if deleted else "File deletion failed"

    # --------------------------- Folders --------------------------- #

    @registry.tool("mentortools_list_folders", ListFoldersInput, title="List Folders", hints=READ_ONLY)
    def mentortools_list_folders(params) -> str:
        """
        List folders in media storage.

        Args:
          - parent_folder_id (number, optional): Parent folder ID (omit for root)
          - limit (number, optional): Max results (default: 100)
          - offset (number, optional): Pagination offset

        Returns: Array of folders
        """
        return format_json(folders.list_folders(params.limit, params.offset, params.parent_folder_id))

    @registry.tool("mentortools_list_all_folders", ListAllFoldersInput, title="List All Folders", hints=READ_ONLY)
    def mentortools_list_all_folders(params) -> str:
        """
        List all folders in media storage (ignoring hierarchy).

        Args:
          - limit (number, optional): Max results (default: 100)
          - offset (number, optional): Pagination offset

        Returns: Array of all folders
        """
        return format_json(folders.list_all_folders(params.limit, params.offset))

    @registry.tool("mentortools_count_folders", CountFoldersInput, title="Count Folders", hints=READ_ONLY)
    def mentortools_count_folders(params) -> str:
        """
        Get folder count.

        Args:
          - parent_folder_id (number, optional): Parent folder ID (omit for root)

        Returns: Number of folders
        """
        return f"Folder count: {folders.count_folders(params.parent_folder_id)}"

    @registry.tool("mentortools_count_all_folders", EmptyInput, title="Count All Folders", hints=READ_ONLY)
    def mentortools_count_all_folders(params) -> str:
        """
        Get total folder count (ignoring hierarchy).

        Returns: Total number of folders
        """
        return f"Total folders: {folders.count_all_folders()}"

    @registry.tool("mentortools_get_folder", FolderIdInput, title="Get Folder", hints=READ_ONLY)
    def mentortools_get_folder(params) -> str:
        """
        Get folder information by ID.

        Args:
          - folder_id (number): Folder ID

        Returns: Folder info
        """
        return format_json(folders.get_folder(params.folder_id))

    @registry.tool("mentortools_create_folder", FolderCreateInput, title="Create Folder", hints=CREATE)
    def mentortools_create_folder(params) -> str:
        """
        Create a new folder in media storage.

        Args:
          - name (string, required): Folder name
          - parent_folder_id (number, optional): Parent folder ID (omit for root)

        Returns: ID of the newly created folder
        """
        folder_id = folders.create_folder(params.to_payload())
        return f"Folder created successfully. ID: {folder_id}"

    @registry.tool("mentortools_update_folder", UpdateFolderParams, title="Update Folder", hints=UPDATE)
    def mentortools_update_folder(params) -> str:
        """
        Update folder (rename or move).

        Args:
          - folder_id (number, required): Folder ID
          - name (string, required): New folder name
          - parent_folder_id (number, optional): Move to folder (omit for root)

        Returns: Success status
        """
        updated = folders.update_folder(params.folder_id, params.to_payload("folder_id"))
        return "Folder updated successfully" if updated else "Folder update failed"

    @registry.tool("mentortools_delete_folder", FolderIdInput, title="Delete Folder", hints=DELETE)
    def mentortools_delete_folder(params) -> str:
        """
        Delete a folder from media storage.

        Args:
          - folder_id (number): Folder ID

        Returns: Success status
        """
        deleted = folders.delete_folder(params.folder_id)
        return "Folder deleted successfully" if deleted else "Folder deletion failed"
