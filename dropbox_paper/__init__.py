"""
Dropbox Paper Python Client.

A small async client for listing, exporting and locating Dropbox Paper documents.

Example:
    ```python
    from dropbox_paper import DocExportRequest, ExportFormat, PaperClient

    async with PaperClient("my-token") as client:
        page = await client.list_docs()
        meta, content = await client.download_doc(
            DocExportRequest(doc_id=page.doc_ids[0], export_format=ExportFormat.HTML)
        )
    ```
"""

from dropbox_paper.client import PaperClient
from dropbox_paper.config import PaperConfig
from dropbox_paper.exceptions import (
    EncodingError,
    PaperError,
    RemoteError,
    RequestCancelledError,
    TransportError,
)
from dropbox_paper.models.paper import (
    Cursor,
    DocExportRequest,
    DocExportResult,
    ExportFormat,
    Folder,
    FolderRef,
    FoldersContainingDoc,
    FolderSharingPolicy,
    ListDocsArgs,
    ListDocsFilterBy,
    ListDocsResponse,
    ListDocsSortBy,
    ListDocsSortOrder,
)
from dropbox_paper.protocol import PaperAPI

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PaperClient",
    "PaperConfig",
    "PaperAPI",
    # Models
    "ListDocsArgs",
    "ListDocsFilterBy",
    "ListDocsSortBy",
    "ListDocsSortOrder",
    "ListDocsResponse",
    "Cursor",
    "ExportFormat",
    "DocExportRequest",
    "DocExportResult",
    "FolderRef",
    "Folder",
    "FolderSharingPolicy",
    "FoldersContainingDoc",
    # Exceptions
    "PaperError",
    "EncodingError",
    "TransportError",
    "RemoteError",
    "RequestCancelledError",
]
