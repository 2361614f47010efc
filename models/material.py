# -*- coding: utf-8 -*-
"""
Course material models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Material:
    """Material as listed by the teacher/student materials endpoints."""

    id: str = ""
    title: str = ""
    type: str = "theory"  # theory, practical, other
    file_name: str = ""
    mime_type: str = ""
    size: int = 0
    thumbnail_url: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Material':
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            title=data.get("title") or "",
            type=data.get("type") or "other",
            file_name=data.get("originalName") or data.get("fileName") or "",
            mime_type=data.get("mimeType") or "",
            size=int(data.get("fileSize") or data.get("size") or 0),
            thumbnail_url=data.get("thumbnailUrl"),
            created_at=data.get("createdAt"),
        )


@dataclass
class MaterialDraft:
    """Upload form state for a new or edited material."""

    title: str = ""
    type: str = "theory"
    file_path: Optional[str] = None
    thumbnail_path: Optional[str] = None

    def reset(self):
        self.title = ""
        self.type = "theory"
        self.file_path = None
        self.thumbnail_path = None
