"""
Password length probe.

Registers two fresh users: one with a password of the length the client
advertises as the minimum, one with a password of the minimum the server is
expected to enforce. Reports whether the server agrees with the expected
minimum and whether the client policy disagrees with the server.
"""

import time
from typing import Callable, Optional

from pydantic import BaseModel

from content_seeder.client import ContentApiClient
from content_seeder.config import MIN_CLIENT_PASSWORD_LENGTH, MIN_EXPECTED_PASSWORD_LENGTH, Settings
from content_seeder.console import SeedConsole
from content_seeder.errors import FailureKind
from content_seeder.logging_config import get_logger
from content_seeder.schemas.auth import RegisterRequest

logger = get_logger(__name__)

PASSWORD_FIELD = "password"


def make_password(length: int) -> str:
    """
    Password of exactly `length` chars.

    From 4 chars on it holds upper, lower, digit and symbol; shorter ones keep
    a prefix of that pattern.
    """
    if length < 1:
        raise ValueError(f"Password length must be positive, got {length}")
    return ("Te1!" + "s" * max(length - 4, 0))[:length]


class PasswordAttempt(BaseModel):
    """One registration with a password of a given length."""

    length: int
    accepted: bool
    status_code: Optional[int] = None
    message: Optional[str] = None
    password_error: Optional[str] = None
    transport_error: bool = False


class PasswordPolicyReport(BaseModel):
    """Client vs server minimum password length."""

    client_min: int
    expected_min: int
    below_min: PasswordAttempt
    at_min: PasswordAttempt

    @property
    def server_matches_expected(self) -> bool:
        """Shorter password rejected on the password field, minimum-length one accepted."""
        return (
            not self.below_min.accepted
            and self.below_min.password_error is not None
            and self.at_min.accepted
        )

    @property
    def policy_mismatch(self) -> bool:
        """The server rejects a password the client would allow."""
        return self.below_min.length == self.client_min and not self.below_min.accepted


async def _register_with_length(
    client: ContentApiClient,
    length: int,
    stamp: int,
) -> PasswordAttempt:
    body = RegisterRequest(
        username=f"user{length}char{stamp}",
        email=f"user{length}char{stamp}@example.com",
        password=make_password(length),
        first_name="Test",
        last_name="User",
    )
    result = await client.register(body, step=f"Register with {length} character password")
    if result.ok:
        return PasswordAttempt(length=length, accepted=True, status_code=result.status_code)

    failure = result.failure
    password_error = None
    if result.envelope is not None and result.envelope.error is not None:
        messages = result.envelope.error.field_errors(PASSWORD_FIELD)
        password_error = messages[0] if messages else None
    return PasswordAttempt(
        length=length,
        accepted=False,
        status_code=result.status_code,
        message=failure.message if failure else None,
        password_error=password_error,
        transport_error=bool(failure and failure.kind == FailureKind.TRANSPORT),
    )


async def probe_password_length(
    client: ContentApiClient,
    settings: Settings,
    *,
    expected_min: Optional[int] = None,
    client_min: Optional[int] = None,
    console: Optional[SeedConsole] = None,
    clock: Callable[[], float] = time.time,
) -> PasswordPolicyReport:
    """
    Compare the server's password minimum with the expected and client minimums.

    Args:
        expected_min: Minimum the server should enforce (settings default)
        client_min: Minimum the client advertises (settings default)
    """
    expected_min = expected_min if expected_min is not None else settings.expected_min_password_length
    client_min = client_min if client_min is not None else settings.client_min_password_length
    if expected_min < MIN_EXPECTED_PASSWORD_LENGTH or client_min < MIN_CLIENT_PASSWORD_LENGTH:
        raise ValueError(
            f"Minimums out of range: expected_min={expected_min} (>= {MIN_EXPECTED_PASSWORD_LENGTH}), "
            f"client_min={client_min} (>= {MIN_CLIENT_PASSWORD_LENGTH})"
        )
    below_length = min(client_min, expected_min - 1)

    if console:
        console.note("Testing password length requirements...\n")

    stamp = int(clock() * 1000)
    attempts = []
    for number, length in enumerate((below_length, expected_min), start=1):
        if console:
            console.note(f"{number}. Testing with {length} character password...")
        attempt = await _register_with_length(client, length, stamp)
        attempts.append(attempt)
        if console:
            if attempt.accepted:
                console.note(f"✅ SUCCESS: {length} character password accepted!")
            else:
                console.note(f"❌ FAILED: {length} character password rejected")
                console.note(f"Error: {attempt.message}")
                if attempt.password_error:
                    console.note(f"Password error: {attempt.password_error}")

    report = PasswordPolicyReport(
        client_min=client_min,
        expected_min=expected_min,
        below_min=attempts[0],
        at_min=attempts[1],
    )
    logger.info(
        "Password probe: below_min accepted=%s at_min accepted=%s",
        report.below_min.accepted,
        report.at_min.accepted,
    )

    if console:
        console.note("\n=== RESULT ===")
        if report.server_matches_expected:
            console.note(f"The backend requires {expected_min} characters minimum.")
        else:
            console.note(f"The backend does not enforce the expected {expected_min} character minimum.")
        if report.policy_mismatch:
            console.note(f"The client validation says {client_min} characters.")
            console.note("This mismatch needs to be fixed!")
    return report
