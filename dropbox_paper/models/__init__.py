"""
Domain models for Dropbox Paper.

These are immutable (frozen) dataclasses representing the API payloads.
"""

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

__all__ = [
    # Listing
    "ListDocsArgs",
    "ListDocsFilterBy",
    "ListDocsSortBy",
    "ListDocsSortOrder",
    "ListDocsResponse",
    "Cursor",
    # Export
    "ExportFormat",
    "DocExportRequest",
    "DocExportResult",
    # Folders
    "FolderRef",
    "Folder",
    "FolderSharingPolicy",
    "FoldersContainingDoc",
]
