"""
Mentortools Media Storage API wrapper (files and folders).

Folder-scoped endpoints treat a missing ``parent_folder_id`` as the root
folder, so the parameter is only sent when it is set (0 counts as unset).
"""

from typing import Any, Dict, List, Optional

from .api_client import MentortoolsClient


def _folder_query(parent_folder_id: Optional[int] = None, **params: Any) -> Dict[str, Any]:
    query = dict(params)
    if parent_folder_id:
        query["parent_folder_id"] = parent_folder_id
    return query


class MentortoolsFiles:
    """
    File operations in Mentortools media storage.
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_files(
        self,
        limit: int,
        offset: int,
        parent_folder_id: Optional[int] = None,
        filename: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List files inside one folder (root when ``parent_folder_id`` is omitted).

        API Endpoint:
            GET /mediastorage/v1/files
        """
        query = _folder_query(parent_folder_id, limit=limit, offset=offset)
        if filename:
            query["filename"] = filename
        return self.client.execute("/mediastorage/v1/files", "GET", query=query)

    def list_all_files(self, limit: int, offset: int, filename: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List files across every folder.

        API Endpoint:
            GET /mediastorage/v1/files/all
        """
        query: Dict[str, Any] = {"limit": limit, "offset": offset}
        if filename:
            query["filename"] = filename
        return self.client.execute("/mediastorage/v1/files/all", "GET", query=query)

    def count_files(self, parent_folder_id: Optional[int] = None) -> int:
        """
        API Endpoint:
            GET /mediastorage/v1/files/count
        """
        return self.client.execute("/mediastorage/v1/files/count", "GET", query=_folder_query(parent_folder_id))

    def count_all_files(self) -> int:
        """
        API Endpoint:
            GET /mediastorage/v1/files/all/count
        """
        return self.client.execute("/mediastorage/v1/files/all/count", "GET")

    def get_file(self, file_id: int) -> Dict[str, Any]:
        """
        File metadata: name, extension, size and the ``file_id`` hash used by
        content blocks.

        API Endpoint:
            GET /mediastorage/v1/files/{file_id}
        """
        return self.client.execute(f"/mediastorage/v1/files/{file_id}", "GET")

    def upload_file(self, content: bytes, filename: str, parent_folder_id: Optional[int] = None) -> Any:
        """
        Upload a file (multipart/form-data).

        API Endpoint:
            POST /mediastorage/v1/files/upload
        """
        return self.client.upload_file(content, filename, parent_folder_id)

    def update_file(self, file_id: int, file_data: Dict[str, Any]) -> bool:
        """
        Rename a file or move it to another folder.

        API Endpoint:
            PUT /mediastorage/v1/files/{file_id}
        """
        return self.client.execute(f"/mediastorage/v1/files/{file_id}", "PUT", body=file_data)

    def delete_file(self, file_id: int) -> bool:
        """
        API Endpoint:
            DELETE /mediastorage/v1/files/{file_id}
        """
        return self.client.execute(f"/mediastorage/v1/files/{file_id}", "DELETE")


class MentortoolsFolders:
    """
    Folder operations in Mentortools media storage.
    """

    def __init__(self, client: MentortoolsClient):
        self.client = client

    def list_folders(self, limit: int, offset: int, parent_folder_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        API Endpoint:
            GET /mediastorage/v1/folders
        """
        query = _folder_query(parent_folder_id, limit=limit, offset=offset)
        return self.client.execute("/mediastorage/v1/folders", "GET", query=query)

    def list_all_folders(self, limit: int, offset: int) -> List[Dict[str, Any]]:
        """
        API Endpoint:
            GET /mediastorage/v1/folders/all
        """
        return self.client.execute(
            "/mediastorage/v1/folders/all", "GET",
            query={"limit": limit, "offset": offset},
        )

    def count_folders(self, parent_folder_id: Optional[int] = None) -> int:
        """
        API Endpoint:
            GET /mediastorage/v1/folders/count
        """
        return self.client.execute("/mediastorage/v1/folders/count", "GET", query=_folder_query(parent_folder_id))

    def count_all_folders(self) -> int:
        """
        API Endpoint:
            GET /mediastorage/v1/folders/all/count
        """
        return self.client.execute("/mediastorage/v1/folders/all/count", "GET")

    def get_folder(self, folder_id: int) -> Dict[str, Any]:
        """
        API Endpoint:
            GET /mediastorage/v1/folders/{folder_id}
        """
        return self.client.execute(f"/mediastorage/v1/folders/{folder_id}", "GET")

    def create_folder(self, folder_data: Dict[str, Any]) -> int:
        """
        API Endpoint:
            POST /mediastorage/v1/folders
        """
        return self.client.execute("/mediastorage/v1/folders", "POST", body=folder_data)

    def update_folder(self, folder_id: int, folder_data: Dict[str, Any]) -> bool:
        """
        Rename a folder or move it under another parent.

        API Endpoint:
            PUT /mediastorage/v1/folders/{folder_id}
        """
        return self.client.execute(f"/mediastorage/v1/folders/{folder_id}", "PUT", body=folder_data)

    def delete_folder(self, folder_id: int) -> bool:
        """
        API Endpoint:
            DELETE /mediastorage/v1/folders/{folder_id}
        """
        return self.client.execute(f"/mediastorage/v1/folders/{folder_id}", "DELETE")
