"""
Paper API endpoint definitions.

Provides one typed function per remote operation, handling
request/response transformation.
"""

from dropbox_paper.api.http_client import PaperHttpClient
from dropbox_paper.models.paper import (
    DocExportRequest,
    DocExportResult,
    FolderRef,
    FoldersContainingDoc,
    ListDocsArgs,
    ListDocsResponse,
)

LIST_DOCS = "/2/paper/docs/list"
DOWNLOAD_DOC = "/2/paper/docs/download"
GET_FOLDER_INFO = "/2/paper/docs/get_folder_info"


async def list_docs(
    http: PaperHttpClient,
    args: ListDocsArgs,
    *,
    deadline: float | None = None,
) -> ListDocsResponse:
    """List one page of Paper document IDs."""
    response = await http.rpc(LIST_DOCS, args.to_dict(), deadline=deadline)
    return ListDocsResponse.from_dict(response)


async def download_doc(
    http: PaperHttpClient,
    request: DocExportRequest,
    *,
    deadline: float | None = None,
) -> tuple[DocExportResult, bytes]:
    """
    Export a Paper document.

    Returns:
        Tuple of (export metadata, exported content). Metadata is zero-valued
        when the server did not send any.
    """
    result, content = await http.content(DOWNLOAD_DOC, request.to_dict(), deadline=deadline)
    metadata = DocExportResult.from_dict(result) if result is not None else DocExportResult()
    return metadata, content


async def get_folder_info(
    http: PaperHttpClient,
    ref: FolderRef,
    *,
    deadline: float | None = None,
) -> FoldersContainingDoc:
    """Get the folders containing a Paper document."""
    response = await http.rpc(GET_FOLDER_INFO, ref.to_dict(), deadline=deadline)
    return FoldersContainingDoc.from_dict(response)
