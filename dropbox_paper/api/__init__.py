"""
Dropbox API client layer.

Provides async HTTP communication with the Dropbox RPC API.
"""

from dropbox_paper.api.http_client import (
    API_ARG_HEADER,
    API_RESULT_HEADER,
    PaperHttpClient,
    sanitize_headers,
)

__all__ = ["API_ARG_HEADER", "API_RESULT_HEADER", "PaperHttpClient", "sanitize_headers"]
