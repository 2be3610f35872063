"""
Duplicate registration probe.

Registers the same username twice; the second call must come back as a
non-success envelope with a conflict-style message.
"""

import re
from typing import Optional

from pydantic import BaseModel

from content_seeder.client import ApiResult, ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole
from content_seeder.logging_config import get_logger
from content_seeder.schemas.auth import RegisterRequest

logger = get_logger(__name__)

CONFLICT_STATUS = 409
CONFLICT_PATTERN = re.compile(r"already|exist|taken|duplicate|conflict|in use", re.IGNORECASE)


class RegistrationAttempt(BaseModel):
    """One register call as observed by the probe."""

    status_code: Optional[int] = None
    success: bool = False
    message: Optional[str] = None


class DuplicateProbeResult(BaseModel):
    """Outcome of registering the same username twice."""

    username: str
    first: RegistrationAttempt
    second: RegistrationAttempt
    conflict_detected: bool


def is_conflict(result: ApiResult) -> bool:
    """True when a failed call looks like a uniqueness conflict."""
    if result.ok or result.failure is None:
        return False
    if result.status_code == CONFLICT_STATUS:
        return True
    return bool(CONFLICT_PATTERN.search(result.failure.message))


def _attempt(result: ApiResult) -> RegistrationAttempt:
    return RegistrationAttempt(
        status_code=result.status_code,
        success=result.ok,
        message=result.failure.message if result.failure else None,
    )


async def probe_duplicate_registration(
    client: ContentApiClient,
    settings: Settings,
    console: Optional[SeedConsole] = None,
) -> DuplicateProbeResult:
    """Register settings.probe_username twice and check the second call conflicts."""
    body = RegisterRequest(
        email=settings.probe_email,
        username=settings.probe_username,
        password=settings.probe_password,
        first_name="Test",
        last_name="User",
    )
    if console:
        console.note("Testing duplicate username registration...\n")

    # The first call may already conflict if the user exists from an earlier run
    first = await client.register(body, step="Register (first)")
    second = await client.register(body, step="Register (second)")

    result = DuplicateProbeResult(
        username=settings.probe_username,
        first=_attempt(first),
        second=_attempt(second),
        conflict_detected=is_conflict(second),
    )
    logger.info(
        "Duplicate probe: second status=%s conflict=%s",
        second.status_code,
        result.conflict_detected,
    )

    if console:
        console.note(f"Response status: {second.status_code}")
        console.json(second.envelope.model_dump() if second.envelope else None)
        if result.conflict_detected:
            console.note(f"✅ Duplicate rejected: {result.second.message}")
        else:
            console.note("❌ Duplicate registration was not rejected with a conflict")
    return result
