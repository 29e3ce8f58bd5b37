"""
Dropbox Paper client facade.

This is the main entry point for users of the library. Each operation makes
exactly one request; there are no retries and no automatic pagination.
"""

from pathlib import Path
from typing import Self

import httpx
import structlog

from dropbox_paper.api import endpoints
from dropbox_paper.api.http_client import PaperHttpClient
from dropbox_paper.config import PaperConfig
from dropbox_paper.models.paper import (
    DocExportRequest,
    DocExportResult,
    FolderRef,
    FoldersContainingDoc,
    ListDocsArgs,
    ListDocsResponse,
)

logger = structlog.get_logger(__name__)


class PaperClient:
    """
    Async client for Dropbox Paper.

    Example:
        ```python
        async with PaperClient(token) as client:
            page = await client.list_docs(ListDocsArgs(limit=10))
            for doc_id in page.doc_ids:
                result, content = await client.download_doc(DocExportRequest(doc_id=doc_id))
        ```

    The client holds no per-call state, so one instance may serve concurrent calls.
    """

    def __init__(
        self,
        token: str,
        config: PaperConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Paper client. No request is made and the token is not checked.

        Args:
            token: OAuth bearer token.
            config: Client configuration. Uses defaults if not provided.
            transport: Optional httpx transport for testing.
        """
        self._config = config or PaperConfig()
        self._http = PaperHttpClient(token, self._config, transport=transport)

    async def __aenter__(self) -> Self:
        """Enter async context."""
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.aclose()
        logger.debug("Client closed")

    async def list_docs(
        self, args: ListDocsArgs | None = None, *, deadline: float | None = None
    ) -> ListDocsResponse:
        """
        List one page of Paper document IDs.

        Call again with the returned cursor while ``has_more`` is set.

        Args:
            args: Filter, sort and limit options. Server defaults if None.
            deadline: Seconds the call may take; None for no limit.

        Raises:
            RemoteError: If the API rejected the request.
            TransportError: If the API could not be reached.
            EncodingError: If the response did not match the expected shape.
            RequestCancelledError: If the deadline expired.
        """
        return await endpoints.list_docs(self._http, args or ListDocsArgs(), deadline=deadline)

    async def download_doc(
        self, request: DocExportRequest, *, deadline: float | None = None
    ) -> tuple[DocExportResult, bytes]:
        """
        Export a Paper document.

        Args:
            request: Document ID and export format.
            deadline: Seconds the call may take; None for no limit.

        Returns:
            Tuple of (export metadata, exported content). The content is returned
            even when the server sent no metadata; the metadata is then zero-valued.
        """
        return await endpoints.download_doc(self._http, request, deadline=deadline)

    async def download_doc_to_file(
        self,
        request: DocExportRequest,
        destination: Path | str,
        *,
        deadline: float | None = None,
    ) -> DocExportResult:
        """
        Export a Paper document and save it to disk.

        Args:
            request: Document ID and export format.
            destination: Local file path to save to.
            deadline: Seconds the request may take; None for no limit.

        Returns:
            Export metadata.
        """
        result, content = await self.download_doc(request, deadline=deadline)

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content)

        logger.info("Document saved", doc_id=request.doc_id, destination=str(destination))
        return result

    async def get_doc_folder_info(
        self, ref: FolderRef, *, deadline: float | None = None
    ) -> FoldersContainingDoc:
        """
        Get the folders containing a Paper document.

        Args:
            ref: Document to look up.
            deadline: Seconds the call may take; None for no limit.

        Returns:
            Sharing policy and folders, outermost first.
        """
        return await endpoints.get_folder_info(self._http, ref, deadline=deadline)
