"""
Dropbox Paper client configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class PaperConfig:
    """
    Attributes:
        api_url: Base URL for the Dropbox RPC API.
        timeout: Transport timeout in seconds (connect, read, write, pool).
        user_agent: User-Agent header value.
    """

    api_url: str = "https://api.dropboxapi.com"
    timeout: float = 30.0
    user_agent: str = "DropboxPaper-Python/0.1"

    def __post_init__(self) -> None:
        if not self.api_url:
            msg = "api_url must not be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
