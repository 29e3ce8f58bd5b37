"""
Paper document domain models.

Request models serialize with ``to_dict``; response models are built from the
decoded JSON with ``from_dict``, which raises EncodingError when the payload
does not match the expected shape.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Self

from dropbox_paper.exceptions import EncodingError


class ListDocsFilterBy(StrEnum):
    """Which documents to include in a listing."""

    ACCESSED = "accessed"
    MODIFIED = "modified"
    CREATED = "created"


class ListDocsSortBy(StrEnum):
    """Field used to sort a listing."""

    ACCESSED = "accessed"
    MODIFIED = "modified"
    CREATED = "created"


class ListDocsSortOrder(StrEnum):
    """Direction of a listing sort."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class ExportFormat(StrEnum):
    """Format a document is exported to."""

    MARKDOWN = "markdown"
    HTML = "html"


class FolderSharingPolicy(StrEnum):
    """Sharing policy of the folders containing a document."""

    TEAM = "team"
    INVITE_ONLY = "invite_only"


@dataclass(frozen=True, kw_only=True)
class ListDocsArgs:
    """
    Arguments for listing Paper documents.

    Unset fields are left out of the request so the server applies its defaults.
    """

    filter_by: ListDocsFilterBy | None = None
    sort_by: ListDocsSortBy | None = None
    sort_order: ListDocsSortOrder | None = None
    limit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        result: dict[str, Any] = {}
        if self.filter_by is not None:
            result["filter_by"] = _enum(ListDocsFilterBy, self.filter_by).value
        if self.sort_by is not None:
            result["sort_by"] = _enum(ListDocsSortBy, self.sort_by).value
        if self.sort_order is not None:
            result["sort_order"] = _enum(ListDocsSortOrder, self.sort_order).value
        if self.limit is not None:
            result["limit"] = self.limit
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "ListDocsArgs")
        filter_by = _get(data, "filter_by", str, None)
        sort_by = _get(data, "sort_by", str, None)
        sort_order = _get(data, "sort_order", str, None)
        return cls(
            filter_by=_enum(ListDocsFilterBy, filter_by) if filter_by else None,
            sort_by=_enum(ListDocsSortBy, sort_by) if sort_by else None,
            sort_order=_enum(ListDocsSortOrder, sort_order) if sort_order else None,
            limit=_get(data, "limit", int, None),
        )


@dataclass(frozen=True, kw_only=True)
class Cursor:
    """Opaque pagination cursor returned by a listing."""

    value: str = ""
    expiration: str = ""

    @property
    def expires_at(self) -> datetime | None:
        """Expiration as a datetime, or None if missing or unparseable."""
        if not self.expiration:
            return None
        try:
            return datetime.fromisoformat(self.expiration)
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "Cursor")
        return cls(
            value=_get(data, "value", str, ""),
            expiration=_get(data, "expiration", str, ""),
        )


@dataclass(frozen=True, kw_only=True)
class ListDocsResponse:
    """
    One page of document IDs.

    Callers fetch further pages themselves when ``has_more`` is set.
    """

    doc_ids: tuple[str, ...] = ()
    cursor: Cursor = Cursor()
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "ListDocsResponse")
        doc_ids = _get(data, "doc_ids", list, [])
        if not all(isinstance(doc_id, str) for doc_id in doc_ids):
            raise EncodingError("doc_ids must contain only strings")
        cursor = data.get("cursor")
        return cls(
            doc_ids=tuple(doc_ids),
            cursor=Cursor.from_dict(cursor) if cursor is not None else Cursor(),
            has_more=_get(data, "has_more", bool, False),
        )


@dataclass(frozen=True, kw_only=True)
class DocExportRequest:
    """Document to export and the format to export it in."""

    doc_id: str
    export_format: ExportFormat = ExportFormat.MARKDOWN

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        return {
            "doc_id": self.doc_id,
            "export_format": _enum(ExportFormat, self.export_format).value,
        }


@dataclass(frozen=True, kw_only=True)
class DocExportResult:
    """
    Metadata returned alongside exported document content.

    All fields keep their zero value when the server sent no metadata.
    """

    owner: str = ""
    title: str = ""
    revision: int = 0
    mime_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "DocExportResult")
        return cls(
            owner=_get(data, "owner", str, ""),
            title=_get(data, "title", str, ""),
            revision=_get(data, "revision", int, 0),
            mime_type=_get(data, "mime_type", str, ""),
        )


@dataclass(frozen=True, kw_only=True)
class FolderRef:
    """Reference to a document whose folder placement is queried."""

    doc_id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation."""
        return {"doc_id": self.doc_id}


@dataclass(frozen=True, kw_only=True)
class Folder:
    """A Paper folder."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "Folder")
        return cls(id=_get(data, "id", str, ""), name=_get(data, "name", str, ""))


@dataclass(frozen=True, kw_only=True)
class FoldersContainingDoc:
    """
    Folder placement of a document.

    Folders are ordered outermost first.
    """

    sharing_policy: FolderSharingPolicy | None = None
    folders: tuple[Folder, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _expect_object(data, "FoldersContainingDoc")

        policy = _first_present(data, "FolderSharingPolicyType", "folder_sharing_policy_type")
        if isinstance(policy, dict):
            policy = policy.get(".tag")
        if policy is not None and not isinstance(policy, str):
            raise EncodingError("Invalid folder sharing policy", value=policy)

        folders = _first_present(data, "Folders", "folders")
        if folders is None:
            folders = []
        if not isinstance(folders, list):
            raise EncodingError("Folders must be a list", value=type(folders).__name__)

        return cls(
            sharing_policy=_enum(FolderSharingPolicy, policy) if policy else None,
            folders=tuple(Folder.from_dict(f) for f in folders),
        )


def _expect_object(data: Any, model: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise EncodingError(f"Expected a JSON object for {model}", got=type(data).__name__)
    return data


def _get(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read an optional field, rejecting values of the wrong JSON type."""
    value = data.get(key)
    if value is None:
        return default
    # bool is a subclass of int, but JSON true/false is not a number
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise EncodingError(
            f"Field {key!r} has the wrong type",
            expected=kind.__name__,
            got=type(value).__name__,
        )
    return value


def _first_present(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _enum(enum_type: type[StrEnum], value: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        raise EncodingError(f"Unknown {enum_type.__name__} value", value=value) from e
