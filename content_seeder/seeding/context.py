"""
Per-run seeding state: credentials, bearer token and the growing ID map.

Created at the start of a run, passed explicitly through every step and
discarded (after being recorded) at the end.
"""

from dataclasses import dataclass, field
from typing import Optional

from content_seeder.schemas.auth import RegisterRequest
from content_seeder.schemas.record import ContentIds, SeedRecord


@dataclass
class SeedContext:
    """Mutable state threaded through the seed pipeline."""
    credentials: RegisterRequest
    token: Optional[str] = None
    user_id: Optional[str] = None
    content_ids: ContentIds = field(default_factory=ContentIds)

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    def to_record(self) -> SeedRecord:
        if not self.token or not self.user_id:
            raise ValueError("Cannot record a run before authentication completed")
        return SeedRecord(
            admin_user=self.credentials,
            auth_token=self.token,
            user_id=self.user_id,
            content_ids=self.content_ids,
        )
