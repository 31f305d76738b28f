"""Feature layer operations: query, edits and attachments."""

from __future__ import annotations

from .attachments import add_attachment, delete_attachments, get_attachments, update_attachment
from .edit import add_features, apply_edits, delete_features, update_features
from .query import get_feature, query_features

__all__ = [
    "add_attachment",
    "add_features",
    "apply_edits",
    "delete_attachments",
    "delete_features",
    "get_attachments",
    "get_feature",
    "query_features",
    "update_attachment",
    "update_features",
]
