"""
Persisted seed record (content-ids.json).
"""

from typing import Dict, List

from pydantic import Field

from content_seeder.schemas.auth import CamelModel, RegisterRequest


class ContentIds(CamelModel):
    """Every ID created by a seed run, grouped by node type."""

    subjects: Dict[str, str] = Field(default_factory=dict)
    chapters: Dict[str, str] = Field(default_factory=dict)
    lectures: Dict[str, str] = Field(default_factory=dict)
    sections: Dict[str, str] = Field(default_factory=dict)
    points: Dict[str, str] = Field(default_factory=dict)
    spoints: List[str] = Field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {
            "subjects": len(self.subjects),
            "chapters": len(self.chapters),
            "lectures": len(self.lectures),
            "sections": len(self.sections),
            "points": len(self.points),
            "spoints": len(self.spoints),
        }


class SeedRecord(CamelModel):
    """Credentials, token and IDs written at the end of a successful run."""

    admin_user: RegisterRequest
    auth_token: str
    user_id: str
    content_ids: ContentIds
