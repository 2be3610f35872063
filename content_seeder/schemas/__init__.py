"""
Pydantic schemas for API request/response payloads.
"""

from content_seeder.schemas.common import (
    ApiEnvelope,
    ApiErrorBody,
    CreatedResource,
)
from content_seeder.schemas.auth import (
    CamelModel,
    RegisterRequest,
    LoginRequest,
    UserInfo,
    RegisterData,
    LoginData,
)
from content_seeder.schemas.content import (
    Visibility,
    ContentNodeCreate,
    SubjectCreate,
    ChapterCreate,
    LectureCreate,
    SectionCreate,
    PointCreate,
    SPointCreate,
)
from content_seeder.schemas.record import ContentIds, SeedRecord

__all__ = [
    # Common
    "ApiEnvelope",
    "ApiErrorBody",
    "CreatedResource",
    # Auth
    "CamelModel",
    "RegisterRequest",
    "LoginRequest",
    "UserInfo",
    "RegisterData",
    "LoginData",
    # Content
    "Visibility",
    "ContentNodeCreate",
    "SubjectCreate",
    "ChapterCreate",
    "LectureCreate",
    "SectionCreate",
    "PointCreate",
    "SPointCreate",
    # Record
    "ContentIds",
    "SeedRecord",
]
