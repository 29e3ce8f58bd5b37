"""
Paper API protocol definition.

This defines the operations a Paper client offers, allowing test doubles
to stand in for PaperClient without changing the calling code.
"""

from typing import Protocol, runtime_checkable

from dropbox_paper.models.paper import (
    DocExportRequest,
    DocExportResult,
    FolderRef,
    FoldersContainingDoc,
    ListDocsArgs,
    ListDocsResponse,
)


@runtime_checkable
class PaperAPI(Protocol):
    """Interface for the Paper document operations."""

    async def list_docs(
        self, args: ListDocsArgs | None = None, *, deadline: float | None = None
    ) -> ListDocsResponse:
        """
        List one page of document IDs.

        Args:
            args: Filter, sort and limit options. Server defaults if None.
            deadline: Seconds the call may take; None for no limit.

        Returns:
            Document IDs with a cursor for the next page.
        """
        ...

    async def download_doc(
        self, request: DocExportRequest, *, deadline: float | None = None
    ) -> tuple[DocExportResult, bytes]:
        """
        Export a document.

        Args:
            request: Document ID and export format.
            deadline: Seconds the call may take; None for no limit.

        Returns:
            Tuple of (export metadata, exported content).
        """
        ...

    async def get_doc_folder_info(
        self, ref: FolderRef, *, deadline: float | None = None
    ) -> FoldersContainingDoc:
        """
        Get the folders containing a document.

        Args:
            ref: Document to look up.
            deadline: Seconds the call may take; None for no limit.

        Returns:
            Sharing policy and folders, outermost first.
        """
        ...
