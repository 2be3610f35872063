"""
Content node creation payloads.

Subject -> Chapter -> Lecture -> Section -> Point -> SPoint (sub-point).
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from content_seeder.schemas.auth import CamelModel


class Visibility(str, Enum):
    """Visibility flag of a content node."""
    PERSONAL = "personal"
    PUBLIC = "public"


class ContentNodeCreate(CamelModel):
    """Fields shared by named content nodes."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    order_index: int = Field(..., ge=1)
    visibility: Visibility = Visibility.PERSONAL


class SubjectCreate(ContentNodeCreate):
    """Root-level container. Chapters are attached through the link endpoint."""


class ChapterCreate(ContentNodeCreate):
    """Second-level node, created unattached."""


class LectureCreate(ContentNodeCreate):
    chapter_id: str


class SectionCreate(ContentNodeCreate):
    lecture_id: str


class PointCreate(ContentNodeCreate):
    section_id: str


class SPointCreate(CamelModel):
    """Leaf item under a point. Carries text instead of name/description."""

    default_content: str = Field(..., min_length=1)
    order_index: int = Field(..., ge=1)
    visibility: Visibility = Visibility.PERSONAL
    point_id: str
